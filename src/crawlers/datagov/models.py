"""
Record types produced by the data.gov crawlers
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DatasetRecord:
    """One search result: publisher, title and resource formats."""

    organization: Optional[str] = None
    dataset_name: Optional[str] = None
    data_formats: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organization": self.organization,
            "dataSetName": self.dataset_name,
            "dataFormats": list(self.data_formats),
        }
