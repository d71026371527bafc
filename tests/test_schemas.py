import pytest
from pydantic import ValidationError

from src.app.schemas import InsertAnnotation, InsertModel, InsertUser, Model, UserRead


def error_locs(exc_info):
    return {err["loc"][0] for err in exc_info.value.errors()}


def test_insert_user_admits_exactly_username_and_password(user_payload):
    user = InsertUser.model_validate(user_payload)

    assert set(InsertUser.model_fields) == {"username", "password"}
    assert user.model_dump() == {"username": "alice", "password": "secret"}


@pytest.mark.parametrize("missing", ["username", "password"])
def test_insert_user_requires_both_fields(user_payload, missing):
    del user_payload[missing]

    with pytest.raises(ValidationError) as exc_info:
        InsertUser.model_validate(user_payload)

    assert error_locs(exc_info) == {missing}


def test_insert_user_rejects_id(user_payload):
    with pytest.raises(ValidationError) as exc_info:
        InsertUser.model_validate({**user_payload, "id": "abc"})

    assert exc_info.value.errors()[0]["type"] == "extra_forbidden"
    assert error_locs(exc_info) == {"id"}


def test_insert_user_rejects_non_text_values():
    with pytest.raises(ValidationError) as exc_info:
        InsertUser.model_validate({"username": "alice", "password": 1234})

    types = {err["loc"][0]: err["type"] for err in exc_info.value.errors()}
    assert types == {"password": "string_type"}


def test_empty_text_is_still_text(model_payload, annotation_payload):
    user = InsertUser.model_validate({"username": "", "password": ""})
    model = InsertModel.model_validate({**model_payload, "name": "", "fileType": ""})
    annotation = InsertAnnotation.model_validate({**annotation_payload, "title": ""})

    assert user.username == ""
    assert model.file_type == ""
    assert annotation.title == ""


def test_insert_model_field_set():
    assert set(InsertModel.model_fields) == {"name", "file_url", "file_type", "file_size", "uploaded_by"}
    assert all(field.is_required() for field in InsertModel.model_fields.values())


def test_insert_model_example(model_payload):
    model = InsertModel.model_validate(model_payload)

    assert model.file_url == "https://x/chair.glb"
    assert model.file_size == 1024.0
    assert model.model_dump(by_alias=True) == model_payload


@pytest.mark.parametrize("missing", ["name", "fileUrl", "fileType", "fileSize", "uploadedBy"])
def test_insert_model_missing_required_field(model_payload, missing):
    del model_payload[missing]

    with pytest.raises(ValidationError) as exc_info:
        InsertModel.model_validate(model_payload)

    assert error_locs(exc_info) == {missing}


@pytest.mark.parametrize(
    "extra", [{"id": "caller-chosen"}, {"uploadedAt": "2024-01-01T00:00:00Z"}, {"uploaded_at": None}]
)
def test_insert_model_never_takes_system_assigned_fields(model_payload, extra):
    with pytest.raises(ValidationError) as exc_info:
        InsertModel.model_validate({**model_payload, **extra})

    assert error_locs(exc_info) == set(extra)
    assert all(err["type"] == "extra_forbidden" for err in exc_info.value.errors())


def test_insert_model_file_size_must_be_a_number(model_payload):
    with pytest.raises(ValidationError) as exc_info:
        InsertModel.model_validate({**model_payload, "fileSize": "1024"})

    assert error_locs(exc_info) == {"fileSize"}


def test_insert_annotation_description_is_optional(annotation_payload):
    del annotation_payload["description"]

    annotation = InsertAnnotation.model_validate(annotation_payload)

    assert annotation.description is None
    assert not InsertAnnotation.model_fields["description"].is_required()


@pytest.mark.parametrize("missing", ["title", "roomId", "position", "createdBy"])
def test_insert_annotation_missing_required_field(annotation_payload, missing):
    del annotation_payload[missing]

    with pytest.raises(ValidationError) as exc_info:
        InsertAnnotation.model_validate(annotation_payload)

    assert error_locs(exc_info) == {missing}


def test_insert_annotation_position_cannot_be_null(annotation_payload):
    with pytest.raises(ValidationError) as exc_info:
        InsertAnnotation.model_validate({**annotation_payload, "position": None})

    assert error_locs(exc_info) == {"position"}


@pytest.mark.parametrize("position", [[0.5, 1, -2], "1,2,3", 7, {"anchor": {"x": 0}}])
def test_insert_annotation_position_takes_any_json_value(annotation_payload, position):
    annotation = InsertAnnotation.model_validate({**annotation_payload, "position": position})

    assert annotation.position == position


@pytest.mark.parametrize("extra", ["id", "createdAt"])
def test_insert_annotation_rejects_system_assigned_fields(annotation_payload, extra):
    with pytest.raises(ValidationError) as exc_info:
        InsertAnnotation.model_validate({**annotation_payload, extra: "x"})

    assert error_locs(exc_info) == {extra}


def test_read_schemas_serialize_camel_case():
    user = UserRead.model_validate({"username": "alice", "password": "secret"})

    assert user.model_dump(by_alias=True) == {"username": "alice"}
    assert "uploadedAt" in Model.model_json_schema(by_alias=True)["properties"]
