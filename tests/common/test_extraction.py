from src.auto_attendance.auto_attendance.common.extraction import extract_first, rules


def test_first_matching_rule_wins_and_reports_its_path():
    ordered = rules("token", "data.token")

    found = extract_first({"token": "top", "data": {"token": "nested"}}, ordered)

    assert found is not None
    assert found.value == "top"
    assert found.source == "token"


def test_empty_values_fall_through_to_next_rule():
    found = extract_first({"token": "", "data": {"token": "nested"}}, rules("token", "data.token"))

    assert found is not None
    assert found.value == "nested"
    assert found.source == "data.token"


def test_non_dict_body_yields_nothing():
    assert extract_first("plain text", rules("token")) is None
    assert extract_first(None, rules("token")) is None
    assert extract_first({"data": "oops"}, rules("data.token")) is None


def test_accept_predicate_is_applied_per_rule():
    found = extract_first({"id": {"nested": 1}, "attendanceId": 7}, rules("id", "attendanceId"), accept=lambda v: isinstance(v, int))

    assert found.value == 7
    assert found.source == "attendanceId"
