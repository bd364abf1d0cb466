"""
Tests for backing record models
"""

import pytest
from pydantic import ValidationError

from catstronomy.models import ENTITY_MODELS, AuthorModel, ModuleModel, TrackModel


class TestTrackModel:
    """Tests for decoding track records from the wire."""

    def test_decodes_camel_case_wire_fields(self):
        track = TrackModel.model_validate(
            {
                "id": "c_0",
                "title": "Cat-stronomy",
                "authorId": "cat-1",
                "modulesCount": 10,
                "numberOfViews": 163,
            }
        )

        assert track.author_id == "cat-1"
        assert track.modules_count == 10
        assert track.number_of_views == 163
        assert track.thumbnail is None

    def test_accepts_python_names(self):
        track = TrackModel(id="c_0", title="Cat-stronomy", author_id="cat-1")

        assert track.author_id == "cat-1"

    def test_keeps_undeclared_wire_attributes(self):
        track = TrackModel.model_validate({"id": "c_0", "title": "T", "topic": "Cat-stronomy"})

        assert track.model_extra == {"topic": "Cat-stronomy"}

    def test_records_are_frozen(self):
        track = TrackModel(id="c_0", title="Cat-stronomy", author_id="cat-1")

        with pytest.raises(ValidationError):
            track.author_id = "cat-2"

    def test_missing_identifier_is_rejected(self):
        with pytest.raises(ValidationError):
            TrackModel.model_validate({"title": "No id"})


def test_module_video_url_alias():
    module = ModuleModel.model_validate({"id": "l_0", "title": "T", "videoUrl": "https://v"})

    assert module.video_url == "https://v"


def test_registry_maps_exposed_entities_to_backing_records():
    assert ENTITY_MODELS["Track"] is TrackModel
    assert ENTITY_MODELS["Author"] is AuthorModel
    assert ENTITY_MODELS["Module"] is ModuleModel

    with pytest.raises(TypeError):
        ENTITY_MODELS["Track"] = AuthorModel  # type: ignore[index]
