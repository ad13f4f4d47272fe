"""Flask backend exposing the campaign total endpoint."""
from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify

from totaliser import ScoreTotalHandler, create_config_from_env

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


def create_app(handler: Optional[ScoreTotalHandler] = None) -> Flask:
    """Build the Flask application around a handler that owns its own cache."""

    score_handler = handler or ScoreTotalHandler(create_config_from_env())
    flask_app = Flask(__name__)

    @flask_app.route("/api/score-total")
    def score_total():
        result = score_handler.handle()
        response = jsonify(result.body)
        response.status_code = result.status
        for name, value in result.headers.items():
            response.headers[name] = value
        return response

    LOGGER.info("Serving campaign total for %s", score_handler.config.source_url)
    return flask_app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
