from judgekit.interactor import a_plus_b
from judgekit.tokens import InputStream, StreamRole
from judgekit.verdict import Verdict


def test_queries_are_forwarded_and_recorded():
    sent, recorded = [], []
    outcome = a_plus_b("2\n1 2\n3 4\n", "3\n7\n", sent.append, recorded.append)
    assert outcome.verdict is Verdict.OK
    assert outcome.message == "2 queries processed"
    assert sent == ["1 2\n", "3 4\n"]
    assert recorded == ["3\n", "7\n"]


def test_records_whatever_solution_answers():
    recorded = []
    outcome = a_plus_b("1\n1 2\n", "100", lambda _line: None, recorded.append)
    assert outcome.verdict is Verdict.OK
    assert recorded == ["100\n"]


def test_zero_queries():
    sent = []
    outcome = a_plus_b("0\n", "", sent.append, lambda _line: None)
    assert outcome.message == "0 queries processed"
    assert sent == []


def test_missing_solution_answer_is_presentation_error():
    outcome = a_plus_b("2\n1 2\n3 4\n", "3\n", lambda _l: None, lambda _l: None)
    assert outcome.verdict is Verdict.PE


def test_bad_solution_answer_is_presentation_error():
    outcome = a_plus_b("1\n1 2\n", "three", lambda _l: None, lambda _l: None)
    assert outcome.verdict is Verdict.PE


def test_malformed_test_is_failure():
    outcome = a_plus_b("2\n1 2\n", "3\n", lambda _l: None, lambda _l: None)
    assert outcome.verdict is Verdict.FAIL


def test_accepts_streams():
    test = InputStream("1\n5 6\n", StreamRole.INPUT)
    solution = InputStream("11\n", StreamRole.OUTPUT)
    recorded = []
    outcome = a_plus_b(test, solution, lambda _l: None, recorded.append)
    assert outcome.verdict is Verdict.OK
    assert recorded == ["11\n"]