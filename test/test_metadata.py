# test/test_metadata.py
import pytest

from particlechart.core import DatasetMeta, InvalidDataset


def test_datasetmeta_accepts_dict_and_normalizes_none():
    m = DatasetMeta(title="Kitchen", attrs={"hello": "world"})
    assert m.attrs == {"hello": "world"}

    m2 = DatasetMeta(attrs=None)
    assert m2.attrs == {}


def test_datasetmeta_rejects_non_dict_attrs():
    with pytest.raises(InvalidDataset):
        DatasetMeta(attrs=123)  # type: ignore[arg-type]

