from typing import Protocol
from flask import Flask
from flask.testing import FlaskClient
from mongo import *
from mongo import config

import pytest

AUTH_CODE = 'the-one-and-only-code'


@pytest.fixture
def app(tmp_path, monkeypatch):
    from app import app as flask_app
    monkeypatch.setattr(config, 'AUTH_CODE', AUTH_CODE)
    # serve dummy pages instead of the built dashboard
    monkeypatch.setattr(config, 'DASHBOARD_DIR', str(tmp_path))
    (tmp_path / 'index.html').write_text('<h1>dashboard</h1>')
    (tmp_path / 'auth.html').write_text('<h1>auth</h1>')
    (tmp_path / 'static').mkdir()
    (tmp_path / 'static' / 'main.js').write_text('console.log(1)')
    app = flask_app()
    app.config['TESTING'] = True
    app.config['SERVER_NAME'] = 'test.test'
    return app


@pytest.fixture
def client(app: Flask):
    return app.test_client()


class ForgeClient(Protocol):

    def __call__(self, token: str = ...) -> FlaskClient:
        ...


@pytest.fixture
def forge_client(client: FlaskClient):

    def seted_cookie(token=None) -> FlaskClient:
        if token is None:
            token = issue_token()
        client.set_cookie(config.AUTH_COOKIE, token, domain='test.test')
        return client

    return seted_cookie


@pytest.fixture
def auth_client(forge_client: ForgeClient):
    return forge_client()
