"""
Offline routing evaluation.

Classifies every labeled case without touching the catalog and prints
per-case routing plus aggregate accuracy.
"""
from media_resolver.service import MediaResolverService
from evaluation.cases import EVAL_CASES
from evaluation.dummy_catalog import DummyCatalog
from evaluation.metrics import calculate_metrics
from evaluation.runner import run_evaluation

# Classification never calls the catalog
catalog = DummyCatalog()
service = MediaResolverService(catalog=catalog)

results = run_evaluation(service, EVAL_CASES)

for r in results:
    print(f"{r['id']}: {r['message']!r}")
    print(f"  -> {r['intent']} ({r['media_type']}) language={r['language']} "
          f"genres={r['genre_ids']} concept={r['concept']} [{r['latency_us']}us]")
    print("-" * 50)

print(calculate_metrics(results, EVAL_CASES))
print(f"catalog calls: {catalog.calls}")
