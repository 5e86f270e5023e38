"""Unit tests for record decoding."""

import dataclasses

import pytest

from .errors import DecodeError
from .models import Release, Repository, ResultItem


def describe_Repository():
    def it_decodes_name_and_full_name():
        repo = Repository.from_json({"name": "tool", "full_name": "octo/tool", "fork": True})
        assert repo == Repository(name="tool", full_name="octo/tool")

    @pytest.mark.parametrize(
        "obj",
        [
            {"full_name": "octo/tool"},
            {"name": "", "full_name": "octo/tool"},
            {"name": "tool"},
            {"name": "tool", "full_name": 7},
            ["tool"],
            None,
        ],
    )
    def it_rejects_malformed_objects(obj):
        with pytest.raises(DecodeError):
            Repository.from_json(obj, "https://forge.test/users/octo/repos")

    def it_is_immutable():
        repo = Repository(name="tool", full_name="octo/tool")
        with pytest.raises(dataclasses.FrozenInstanceError):
            repo.name = "other"


def describe_Release():
    def it_preserves_the_name_verbatim():
        assert Release.from_json({"name": " v1.0 (beta) "}).name == " v1.0 (beta) "

    def it_decodes_null_name_as_empty():
        assert Release.from_json({"name": None, "tag_name": "v1"}).name == ""

    def it_rejects_non_string_names():
        with pytest.raises(DecodeError):
            Release.from_json({"name": 12})


def describe_ResultItem():
    def it_defaults_to_no_releases():
        item = ResultItem(Repository(name="tool", full_name="octo/tool"))
        assert item.releases == ()
