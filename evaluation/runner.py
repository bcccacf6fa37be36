from time import perf_counter


def run_evaluation(service, eval_cases):
    results = []

    for case in eval_cases:
        start = perf_counter()
        intent = service.classify(case["message"])
        latency_us = int((perf_counter() - start) * 1_000_000)

        results.append({
            "id": case["id"],
            "message": case["message"],
            "intent": intent.intent_type.name,
            "media_type": intent.media_type.value,
            "language": intent.language,
            "genre_ids": list(intent.genre_ids),
            "concept": intent.concept is not None,
            "latency_us": latency_us,
        })

    return results
