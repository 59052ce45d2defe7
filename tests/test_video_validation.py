import pytest

from app.services.video_validation import (
    MSG_BODY_NOT_OBJECT,
    MSG_DATE,
    MSG_DESCRIPTION,
    MSG_RESOLUTIONS_MISSING,
    MSG_RESOLUTIONS_NOT_LIST,
    MSG_TITLE,
    ValidationMode,
    normalize_date,
    validate_video_input,
)


def test_valid_create(sample_video):
    result = validate_video_input(sample_video, ValidationMode.CREATE)
    assert result.ok
    assert result.errors == []


def test_create_empty_resolutions_allowed(sample_video):
    sample_video["availableResolutions"] = []
    assert validate_video_input(sample_video).ok


def test_create_missing_everything_reports_all_in_order():
    result = validate_video_input({}, ValidationMode.CREATE)
    assert not result.ok
    assert result.errors == [MSG_TITLE, MSG_DATE, MSG_RESOLUTIONS_MISSING]


def test_all_wrong_types_reported_in_field_order():
    data = {"title": 5, "description": 1, "date": "nope", "availableResolutions": "P720"}
    result = validate_video_input(data, ValidationMode.CREATE)
    assert result.errors == [MSG_TITLE, MSG_DESCRIPTION, MSG_DATE, MSG_RESOLUTIONS_NOT_LIST]


@pytest.mark.parametrize("title", ["", "   ", None, 12, ["x"]])
def test_bad_title(sample_video, title):
    sample_video["title"] = title
    assert validate_video_input(sample_video).errors == [MSG_TITLE]


def test_empty_description_is_valid(sample_video):
    sample_video["description"] = ""
    assert validate_video_input(sample_video).ok


def test_null_description_is_invalid(sample_video):
    sample_video["description"] = None
    assert validate_video_input(sample_video).errors == [MSG_DESCRIPTION]


@pytest.mark.parametrize(
    "date",
    [
        "2023-13-01",
        "yesterday",
        "",
        20230101,
        None,
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
    ],
)
def test_bad_date(sample_video, date):
    sample_video["date"] = date
    assert validate_video_input(sample_video).errors == [MSG_DATE]


def test_each_bad_resolution_named(sample_video):
    sample_video["availableResolutions"] = ["P720", "P9999", "P1", "P1080"]
    result = validate_video_input(sample_video)
    assert result.errors == [
        'Invalid "availableResolutions" value: P9999',
        'Invalid "availableResolutions" value: P1',
    ]


def test_non_string_resolution_does_not_raise(sample_video):
    sample_video["availableResolutions"] = [{"P720": 1}, 720]
    assert len(validate_video_input(sample_video).errors) == 2


def test_duplicate_resolutions_allowed(sample_video):
    sample_video["availableResolutions"] = ["P720", "P720"]
    assert validate_video_input(sample_video).ok


def test_update_empty_body_is_valid():
    assert validate_video_input({}, ValidationMode.UPDATE).ok


def test_update_checks_only_present_fields():
    result = validate_video_input({"title": " ", "availableResolutions": ["X"]}, ValidationMode.UPDATE)
    assert result.errors == [MSG_TITLE, 'Invalid "availableResolutions" value: X']


@pytest.mark.parametrize("mode", [ValidationMode.CREATE, ValidationMode.UPDATE])
@pytest.mark.parametrize("body", [None, [], "title", 3])
def test_non_object_body(mode, body):
    assert validate_video_input(body, mode).errors == [MSG_BODY_NOT_OBJECT]


def test_validation_does_not_mutate_input(sample_video):
    before = dict(sample_video)
    validate_video_input(sample_video)
    assert sample_video == before


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2023-01-01", "2023-01-01T00:00:00.000Z"),
        ("2023-01-01T10:20:30Z", "2023-01-01T10:20:30.000Z"),
        ("2023-01-01T10:20:30.123456+02:00", "2023-01-01T08:20:30.123Z"),
    ],
)
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


def test_normalize_date_rejects_garbage():
    with pytest.raises(ValueError):
        normalize_date("not a date")


def test_snake_case_resolutions_key_is_not_a_field():
    # Only the camelCase key is a field; anything else is an unknown key
    result = validate_video_input({"available_resolutions": ["P9999"]}, ValidationMode.UPDATE)
    assert result.ok
