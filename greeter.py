import logging

from flask import Flask, Response
from werkzeug.serving import make_server

GREETING = 'Hello, Jenkins CI/CD World!'
HOST = '0.0.0.0'
PORT = 8080


class ConfigurationError(ValueError):
    pass


def console_sink(message):
    print(message, flush=True)


def logger_sink(app):
    app.logger.setLevel(logging.INFO)
    return app.logger.info


SINKS = {
    'console': lambda app: console_sink,
    'logger': logger_sink,
}


def resolve_sink(app):
    """Return the announce callable picked by the GREETER_SINK config flag."""
    name = app.config['GREETER_SINK']
    try:
        factory = SINKS[name]
    except KeyError:
        raise ConfigurationError(
            f'unknown GREETER_SINK {name!r}, expected one of {sorted(SINKS)}'
        ) from None
    return factory(app)


def create_app(test_config=None):
    # fixed name so the logger stays 'greeter' when run as __main__
    app = Flask('greeter')
    app.config.from_mapping(GREETER_SINK='console')
    app.config.from_prefixed_env()
    if test_config is not None:
        app.config.from_mapping(test_config)

    # fail at startup, not on the first announce
    resolve_sink(app)

    # runs ahead of routing, so no path or method ever ends in a 404 or 405
    @app.before_request
    def greet():
        return Response(GREETING, status=200, mimetype='text/plain')

    return app


def bind(app, host=HOST, port=PORT):
    """Bind the listener and return the server.

    A port that can't be acquired makes werkzeug print the OS error and
    exit the process with status 1.
    """
    return make_server(host, port, app, threaded=True)


def serve(server, announce):
    announce(f'Server running on port {server.server_address[1]}...')
    server.serve_forever()


def run(app=None, host=HOST, port=PORT):
    if app is None:
        app = create_app()
    serve(bind(app, host, port), resolve_sink(app))


if __name__ == '__main__':
    # Listen on all network interfaces (important for Docker/Kubernetes)
    run()
