EVAL_CASES = [
    {
        "id": "language_and_genre",
        "message": "Telugu horror movies",
        "intent": "DISCOVER",
        "media_type": "movie",
        "language": "te",
        "genre_ids": [27],
    },
    {
        "id": "concept_similarity",
        "message": "Movies like Inception",
        "intent": "SIMILAR_TO",
        "media_type": "movie",
        "concept": True,
    },
    {
        "id": "live_similarity",
        "message": "shows similar to The Office",
        "intent": "SIMILAR_TO",
        "media_type": "tv",
        "concept": False,
    },
    {
        "id": "top_rated_tv",
        "message": "best tv shows",
        "intent": "TOP_RATED",
        "media_type": "tv",
    },
    {
        "id": "trending_neutral",
        "message": "trending",
        "intent": "TRENDING",
        "media_type": "neutral",
    },
    {
        "id": "language_only",
        "message": "korean movies",
        "intent": "DISCOVER",
        "media_type": "movie",
        "language": "ko",
        "genre_ids": [],
    },
    {
        "id": "tv_kids",
        "message": "kids series",
        "intent": "DISCOVER",
        "media_type": "tv",
        "genre_ids": [10762],
    },
    {
        "id": "free_text_themes",
        "message": "time travel and heist",
        "intent": "KEYWORD_FALLBACK",
        "media_type": "neutral",
    },
    {
        "id": "too_short",
        "message": "ok",
        "intent": "UNRESOLVED",
        "media_type": "neutral",
    },
]
