from app.calculation import accuracy_percent, integer_mean, words_per_minute


def test_wpm_skips_spaces():
    assert words_per_minute("the the", 60.0) == 1.2
    assert words_per_minute("abcde abcde", 30.0) == 4.0


def test_accuracy():
    assert accuracy_percent(3, 1) == 75.0
    assert accuracy_percent(0, 0) == 100.0


def test_integer_mean():
    assert integer_mean([]) == 0
    assert integer_mean([1, 2, 2]) == 1
    assert integer_mean([100, 100, 62]) == 87
