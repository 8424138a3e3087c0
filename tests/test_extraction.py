"""Record extraction from dataset-content snapshots."""

import asyncio

from src.crawlers.datagov import DatasetRecord, extract_records
from src.crawlers.datagov.dataset_search import parse_dataset_node
from conftest import FakePage, dataset_node


def _extract(datasets):
    page = FakePage({1: {"links": ["1"], "datasets": datasets}})
    page.current = 1
    return asyncio.run(extract_records(page))


def test_no_containers_gives_no_records():
    assert _extract([]) == []


def test_records_keep_document_order():
    records = _extract([
        dataset_node("USDA", "Crop Yields", ["CSV"]),
        dataset_node("NOAA", "Rainfall", ["JSON", "XML"]),
    ])

    assert records == [
        DatasetRecord("USDA", "Crop Yields", ["CSV"]),
        DatasetRecord("NOAA", "Rainfall", ["JSON", "XML"]),
    ]


def test_format_labels_are_stripped():
    records = _extract([dataset_node(formats=["  CSV\n", "\tPDF "])])
    assert records[0].data_formats == ["CSV", "PDF"]


def test_missing_resource_list_gives_empty_formats():
    record = parse_dataset_node([["USDA"], ["Crop Yields"], ["description"]])
    assert record == DatasetRecord("USDA", "Crop Yields", [])


def test_missing_children_give_absent_fields():
    assert parse_dataset_node([]) == DatasetRecord(None, None, [])
    assert parse_dataset_node([["USDA"]]) == DatasetRecord("USDA", None, [])
    assert parse_dataset_node([[], ["Crop Yields"]]) == DatasetRecord(None, "Crop Yields", [])


def test_null_child_is_treated_as_missing():
    record = parse_dataset_node([None, ["Crop Yields"], None, ["CSV"]])
    assert record == DatasetRecord(None, "Crop Yields", ["CSV"])


def test_formats_stop_at_first_missing_entry():
    record = parse_dataset_node([["USDA"], ["Crop Yields"], [], ["CSV", None, "JSON"]])
    assert record.data_formats == ["CSV"]


def test_one_malformed_container_does_not_affect_others():
    records = _extract([[], dataset_node("NOAA", "Rainfall", ["XML"])])
    assert records == [
        DatasetRecord(None, None, []),
        DatasetRecord("NOAA", "Rainfall", ["XML"]),
    ]


def test_to_dict_uses_output_keys():
    record = DatasetRecord("USDA", "Crop Yields", ["CSV"])
    assert record.to_dict() == {
        "organization": "USDA",
        "dataSetName": "Crop Yields",
        "dataFormats": ["CSV"],
    }
