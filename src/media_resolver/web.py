"""
Flask JSON API over the media resolver.
"""
import logging
from typing import Optional

from flask import Flask, jsonify, request

from .app import MediaResolverApp

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 500


def create_app(resolver: Optional[MediaResolverApp]) -> Flask:
    """
    Build the Flask application.

    :param resolver: Initialized MediaResolverApp, or None when startup failed
    """
    app = Flask(__name__)

    @app.route("/health")
    def health():
        if resolver is None or not resolver.is_initialized:
            return jsonify({"status": "unavailable"}), 503
        return jsonify({"status": "ok"})

    @app.route("/chat", methods=["POST"])
    def chat():
        if resolver is None or not resolver.is_initialized:
            return jsonify({"error": "Resolver not initialized. Please check configuration."}), 503

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "query" not in data:
            return jsonify({"error": "Missing 'query' in request body"}), 400

        query = data["query"]
        if not isinstance(query, str) or not query.strip():
            return jsonify({"error": "Empty query"}), 400

        query = query.strip()
        if len(query) > MAX_QUERY_LENGTH:
            return jsonify(
                {"error": f"Query exceeds maximum length of {MAX_QUERY_LENGTH} characters"}
            ), 400

        reply = resolver.resolve_blocking(query)
        logger.info(f"Chat reply - items: {len(reply.items)}")
        return jsonify(reply.to_dict())

    return app
