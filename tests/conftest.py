"""Test configuration: an in-process echo endpoint standing in for httpbin.org."""

import sys
from pathlib import Path
from urllib.parse import urlsplit

import pytest
import requests
from flask import Flask, jsonify, request
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

# Ensure the package root is importable when tests are executed from the tests directory.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from curl_remote import CurlRemote  # noqa: E402

ECHO_HOST = "http://httpbin.org"


def create_echo_app() -> Flask:
    app = Flask(__name__)

    def _echo(**extra):
        return jsonify(
            args=request.args.to_dict(),
            headers={"User-Agent": request.headers.get("User-Agent", "")},
            url=request.url,
            **extra,
        )

    @app.route("/get", methods=["GET"])
    def get():
        return _echo()

    @app.route("/post", methods=["POST"])
    def post():
        return _echo(form=request.form.to_dict())

    @app.route("/status/<int:code>", methods=["GET", "POST"])
    def status(code):
        return f"status {code}", code

    return app


class FlaskAdapter(BaseAdapter):
    """Transport adapter dispatching requests to a Flask test client."""

    def __init__(self, app):
        super().__init__()
        self.client = app.test_client()
        self.requests = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        parts = urlsplit(request.url)
        headers = {k: v for k, v in request.headers.items() if k.lower() != "content-length"}
        resp = self.client.open(
            parts.path or "/",
            method=request.method,
            query_string=parts.query,
            headers=headers,
            data=request.body,
        )

        response = requests.Response()
        response.status_code = resp.status_code
        response.headers = CaseInsensitiveDict(resp.headers)
        response._content = resp.get_data()
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


class FailingAdapter(BaseAdapter):
    """Transport adapter that fails every request like an unresolvable host."""

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        raise requests.ConnectionError("Could not resolve host: httpbin.org")

    def close(self):
        pass


@pytest.fixture
def echo_adapter():
    return FlaskAdapter(create_echo_app())


@pytest.fixture
def remote(echo_adapter):
    remote = CurlRemote(f"{ECHO_HOST}/get")
    remote.handle.session.mount(ECHO_HOST, echo_adapter)
    yield remote
    remote.close()
