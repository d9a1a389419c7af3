from flask import Flask, render_template, request, jsonify
from waitress import serve
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
import logging
import os

from cli import cli, parse_coefficients
from graph import plot_html
from logs import configure_logging
from presenter import describe, equation
from quadratic import solve

log = logging.getLogger(__name__)


def load_config():
    return {
        'SENTRY_DSN': os.getenv("SENTRY_DSN"),
        'SENTRY_ENVIRONMENT': os.getenv("SENTRY_ENVIRONMENT", "production"),
        'SENTRY_TRACES_SAMPLE_RATE': float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0")),
        'HOST': os.getenv("QUADSOLVE_HOST", "0.0.0.0"),
        'PORT': int(os.getenv("QUADSOLVE_PORT", "8000")),
        'LOG_LEVEL': os.getenv("QUADSOLVE_LOG_LEVEL", "INFO"),
    }


def coefficients_from_request():
    values = [request.args.get(name, '').strip() for name in ('a', 'b', 'c')]
    if any(len(v.split()) != 1 for v in values):
        return None
    return parse_coefficients(' '.join(values))


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    if not app.testing:
        configure_logging(app.config['LOG_LEVEL'])

    # --- Initialize Sentry ---
    if app.config['SENTRY_DSN']:
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=app.config['SENTRY_TRACES_SAMPLE_RATE'],
            environment=app.config['SENTRY_ENVIRONMENT']
        )

    app.cli.add_command(cli.commands['solve'])
    app.cli.add_command(cli.commands['selftest'])

    # --- Routes ---
    @app.route('/')
    @app.route('/index')
    def index():
        return render_template("index.html")

    @app.route('/solve')
    def solve_page():
        coefficients = coefficients_from_request()
        if coefficients is None:
            return render_template("invalid-input.html"), 400

        a, b, c = coefficients
        result = solve(a, b, c)
        log.debug("solve(%r, %r, %r) -> %s", a, b, c, result.outcome.value)
        if not result.ok:
            log.warning("solve(%r, %r, %r) failed: %s", a, b, c, result.error.name)
            return render_template(
                "result.html",
                equation=equation(a, b, c),
                message=describe(result),
                error=result.error,
                graph=None
            ), 422

        return render_template(
            "result.html",
            equation=equation(a, b, c),
            message=describe(result),
            roots=result.roots,
            error=None,
            graph=plot_html(a, b, c, result)
        )

    @app.route('/api/solve')
    def solve_api():
        coefficients = coefficients_from_request()
        if coefficients is None:
            return jsonify({"error": "INPUT_INVALID",
                            "message": "expected three numbers a, b and c"}), 400

        result = solve(*coefficients)
        body = result.as_dict()
        body["message"] = describe(result)
        if not result.ok:
            log.warning("solve%r failed: %s", coefficients, result.error.name)
            return jsonify(body), 422
        return jsonify(body)

    return app


# --- Start server ---
if __name__ == "__main__":
    app = create_app()
    serve(app, host=app.config['HOST'], port=app.config['PORT'])
