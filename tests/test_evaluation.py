"""
Routing evaluation harness runs against the labeled cases.
"""
from evaluation.cases import EVAL_CASES
from evaluation.dummy_catalog import DummyCatalog
from evaluation.metrics import calculate_metrics
from evaluation.runner import run_evaluation
from media_resolver.service import MediaResolverService


def test_labeled_cases_route_correctly(catalog):
    results = run_evaluation(MediaResolverService(catalog), EVAL_CASES)

    metrics = calculate_metrics(results, EVAL_CASES)

    assert metrics["misrouted"] == []
    assert metrics["intent_accuracy"] == 1.0
    assert metrics["media_type_accuracy"] == 1.0
    assert metrics["entity_accuracy"] == 1.0
    assert metrics["total_cases"] == len(EVAL_CASES)
    assert not catalog.method_calls


def test_metrics_report_misroutes():
    cases = [{"id": "a", "intent": "TRENDING", "media_type": "tv", "language": "ko"}]
    results = [{"id": "a", "intent": "DISCOVER", "media_type": "tv", "language": None}]

    metrics = calculate_metrics(results, cases)

    assert metrics["misrouted"] == ["a"]
    assert metrics["intent_accuracy"] == 0.0
    assert metrics["media_type_accuracy"] == 1.0
    assert metrics["entity_accuracy"] == 0.0


def test_dummy_catalog_routes_without_calls():
    catalog = DummyCatalog()

    results = run_evaluation(MediaResolverService(catalog), EVAL_CASES)

    assert calculate_metrics(results, EVAL_CASES)["misrouted"] == []
    assert catalog.calls == 0
