from fizzbuzz_cli.core.analysis import summarize
from fizzbuzz_cli.core.models import Rules


def test_summarize_one_to_hundred() -> None:
    report = summarize(1, 100)
    assert report["total"] == 100
    assert report["by_kind"] == {"FizzBuzz": 6, "Fizz": 27, "Buzz": 14, "Number": 53}
    assert report["range"] == {"start": 1, "end": 100}
    assert report["rules"] == {"fizz": 3, "buzz": 5}


def test_summarize_reports_zero_counts() -> None:
    report = summarize(1, 2)
    assert report["by_kind"] == {"FizzBuzz": 0, "Fizz": 0, "Buzz": 0, "Number": 2}


def test_summarize_with_custom_rules() -> None:
    report = summarize(1, 14, Rules(fizz=2, buzz=7))
    assert report["by_kind"]["FizzBuzz"] == 1
    assert report["by_kind"]["Fizz"] == 6
    assert report["by_kind"]["Buzz"] == 1
    assert report["by_kind"]["Number"] == 6
