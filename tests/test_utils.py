from student_records.utils import address_counter, join_subjects, sanitize_phone, split_subjects


def test_sanitize_phone_strips_non_digits():
    assert sanitize_phone("(987) 654-3210") == "9876543210"
    assert sanitize_phone("abc") == ""
    assert sanitize_phone("") == ""


def test_join_and_split_subjects():
    assert join_subjects(["Math", " Science ", ""]) == "Math, Science"
    assert split_subjects("Math, Science,,") == ["Math", "Science"]
    assert split_subjects("") == []


def test_address_counter():
    assert address_counter("") == "0/55"
    assert address_counter("Mumbai") == "6/55"
