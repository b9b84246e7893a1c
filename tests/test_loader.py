# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

import json
import logging

import pytest

from lagrange_consensus.errors import DocumentError, InsufficientSharesError
from lagrange_consensus.loader import load_document, load_file, recover_from_document
from lagrange_consensus.shares import Share


def _doc(**extra):
    document = {
        "keys": {"n": 4, "k": 2},
        "4": {"base": "10", "value": "100"},
        "1": {"base": "10", "value": "5"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "16", "value": "9"},
    }
    document.update(extra)
    return document


def test_load_document_sorts_and_decodes():
    share_set = load_document(_doc(note="ignored"))
    assert share_set.k == 2
    assert share_set.declared_n == 4
    assert share_set.shares == (Share(1, 5), Share(2, 7), Share(3, 9), Share(4, 100))


def test_recover_from_document():
    secret = recover_from_document(_doc())
    assert secret.to_dict()["value"] == 3
    assert secret.support == 3


def test_recover_insufficient():
    document = {"keys": {"n": 1, "k": 2}, "1": {"base": "10", "value": "5"}}
    with pytest.raises(InsufficientSharesError):
        recover_from_document(document)


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"1": {"base": "10", "value": "5"}},
        {"keys": {"n": 1}},
        {"keys": {"k": 0}},
        {"keys": {"k": "many"}},
        {"keys": {"k": True}},
        {"keys": {"k": 2.7}},
        {"keys": {"k": "2.0"}},
        {"keys": {"k": 2, "n": 4.5}},
        {"keys": {"k": 1}, "1": {"base": "10"}},
        {"keys": {"k": 1}, "1": "5"},
        {"keys": {"k": 1}, "1": {"base": "2", "value": "12"}},
    ],
)
def test_malformed_documents(document):
    with pytest.raises(DocumentError):
        load_document(document)


def test_declared_n_mismatch_only_warns(caplog):
    document = _doc()
    document["keys"] = {"n": 9, "k": 2}
    with caplog.at_level(logging.WARNING, logger="lagrange_consensus"):
        share_set = load_document(document)
    assert share_set.n == 4
    assert "declares n=9" in caplog.text


def test_load_json_fixture(fixtures_dir):
    share_set = load_file(fixtures_dir / "sample.json")
    assert [s.x for s in share_set.shares] == [1, 2, 3, 6]
    assert share_set.shares[-1].y == 39
    assert share_set.k == 3


def test_load_yaml_fixture(fixtures_dir):
    share_set = load_file(fixtures_dir / "corrupted.yaml")
    assert share_set.shares == (Share(1, 5), Share(2, 7), Share(3, 9), Share(4, 100))


def test_unparsable_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DocumentError):
        load_file(path)


def test_unknown_suffix_is_read_as_json(tmp_path):
    path = tmp_path / "shares.txt"
    path.write_text(json.dumps(_doc()), encoding="utf-8")
    assert load_file(path).n == 4


def test_non_decimal_keys_are_ignored():
    share_set = load_document(_doc(**{"²": {"base": "10", "value": "1"}, "٣": {"base": "10", "value": "1"}}))
    assert [s.x for s in share_set.shares] == [1, 2, 3, 4]


def test_string_k_accepted():
    document = _doc()
    document["keys"] = {"n": "4", "k": " 2 "}
    share_set = load_document(document)
    assert (share_set.k, share_set.declared_n) == (2, 4)


def test_keys_naming_same_x_rejected():
    with pytest.raises(DocumentError) as info:
        load_document(_doc(**{"01": {"base": "10", "value": "6"}}))
    assert "'01'" in str(info.value)
    assert "x=1" in str(info.value)
