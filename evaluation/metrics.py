def calculate_metrics(results, eval_cases):
    case_map = {c["id"]: c for c in eval_cases}

    intent_correct = 0
    media_type_correct = 0
    entity_checks = 0
    entity_correct = 0
    failures = []

    for r in results:
        expected = case_map[r["id"]]

        if r["intent"] == expected["intent"]:
            intent_correct += 1
        else:
            failures.append(r["id"])

        if r["media_type"] == expected["media_type"]:
            media_type_correct += 1

        # Only fields the case pins down are scored
        for field in ("language", "genre_ids", "concept"):
            if field in expected:
                entity_checks += 1
                if r[field] == expected[field]:
                    entity_correct += 1

    total = len(results)
    return {
        "intent_accuracy": intent_correct / total if total else 1.0,
        "media_type_accuracy": media_type_correct / total if total else 1.0,
        "entity_accuracy": entity_correct / entity_checks if entity_checks else 1.0,
        "misrouted": failures,
        "total_cases": total,
    }
