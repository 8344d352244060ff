import pytest

from judgekit.scalar_checkers import (
    check_acmp,
    check_dcmp,
    check_hcmp,
    check_icmp,
    check_pointscmp,
    check_pointsinfo,
    check_rcmp,
    check_yesno,
)
from judgekit.tokens import InputStream, StreamRole
from judgekit.verdict import Verdict


@pytest.mark.parametrize("check", [check_acmp, check_rcmp])
def test_absolute_within_tolerance(check):
    assert check("1.0", "1.0000014").verdict is Verdict.OK


@pytest.mark.parametrize("check", [check_acmp, check_rcmp])
def test_absolute_outside_tolerance(check):
    assert check("1.0", "1.0000016").verdict is Verdict.WA


def test_acmp_large_values_are_absolute():
    assert check_acmp("1000000000", "1000000001").verdict is Verdict.WA


def test_dcmp_relative_tolerance():
    assert check_dcmp("1000000000", "1000000100").verdict is Verdict.OK
    assert check_dcmp("1000000000", "1000010000").verdict is Verdict.WA


def test_dcmp_bad_output_is_presentation_error():
    assert check_dcmp("1.5", "abc").verdict is Verdict.PE


def test_double_answer_malformed_fails():
    assert check_acmp("xyz", "1.0").verdict is Verdict.FAIL


def test_icmp_equal():
    outcome = check_icmp("42", "42")
    assert outcome.verdict is Verdict.OK
    assert outcome.message == "answer is 42"


def test_icmp_different():
    outcome = check_icmp("42", "43")
    assert outcome.verdict is Verdict.WA
    assert outcome.message == "expected 42, found 43"


def test_icmp_out_of_range_output():
    assert check_icmp("1", "4294967296").verdict is Verdict.PE


def test_icmp_missing_output():
    assert check_icmp("1", "   ").verdict is Verdict.PE


def test_icmp_accepts_streams():
    answer = InputStream("7", StreamRole.ANSWER)
    output = InputStream("7\n", StreamRole.OUTPUT)
    assert check_icmp(answer, output).verdict is Verdict.OK


def test_hcmp_huge_equal():
    big = "-" + "9" * 200
    assert check_hcmp(big, big).verdict is Verdict.OK


def test_hcmp_leading_zero_output():
    assert check_hcmp("7", "007").verdict is Verdict.PE


def test_hcmp_invalid_answer():
    assert check_hcmp("abc", "1").verdict is Verdict.FAIL


def test_hcmp_answer_with_two_tokens():
    outcome = check_hcmp("1 2", "1")
    assert outcome.verdict is Verdict.FAIL
    assert outcome.message == "expected exactly one token in the answer file"


def test_hcmp_different():
    assert check_hcmp("123456789012345678901234567890", "123456789012345678901234567891").verdict is Verdict.WA


def test_yesno_case_insensitive():
    assert check_yesno("YES", "yEs").verdict is Verdict.OK


def test_yesno_wrong():
    assert check_yesno("NO", "yes").verdict is Verdict.WA


def test_yesno_bad_output():
    assert check_yesno("YES", "maybe").verdict is Verdict.PE


def test_yesno_bad_answer():
    assert check_yesno("perhaps", "YES").verdict is Verdict.FAIL


def test_pointscmp_equal_gives_zero():
    outcome = check_pointscmp("3.25", "3.25")
    assert outcome.verdict is Verdict.POINTS
    assert outcome.points == 0.0


def test_pointscmp_points_symmetric():
    first = check_pointscmp("2.5", "1.0")
    second = check_pointscmp("1.0", "2.5")
    assert first.points == second.points
    assert first.points > 0


def test_pointsinfo_reports_values():
    outcome = check_pointsinfo("1", "2")
    assert outcome.verdict is Verdict.OK
    assert outcome.points_info == "pa=2.000000,ja=1.000000"