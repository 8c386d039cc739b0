import os
import sys
from datetime import datetime
import pytest

# Ensure the backend root (containing the `metrics_viewer` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from metrics_viewer import create_app, db


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import metrics_viewer.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


class FakeResult:
    """Stands in for a streaming cursor; rows are yielded until ``fail_with`` is hit."""

    def __init__(self, rows, fail_with=None):
        self.rows = rows
        self.fail_with = fail_with
        self.closed = False

    def __iter__(self):
        for row in self.rows:
            yield row
        if self.fail_with is not None:
            raise self.fail_with

    def close(self):
        self.closed = True


@pytest.fixture()
def seed_rounds(flask_app):
    from metrics_viewer.models import BlackCard, RoundComplete

    def _seed():
        db.session.add_all([
            BlackCard(uid='bc1', text='Why am I sticky?', watermark='PAX', pick=1, draw=0),
            BlackCard(uid='bc2', text='Step 1: ____. Step 2: ____. Step 3: Profit.', watermark='CAH2', pick=2, draw=1),
        ])
        db.session.add_all([
            RoundComplete(round_id='r1', game_id='g1', black_card_uid='bc1', timestamp=datetime(2018, 3, 1, 10, 0, 0)),
            RoundComplete(round_id='r3', game_id='g1', black_card_uid='bc1', timestamp=datetime(2018, 3, 1, 12, 0, 0)),
            RoundComplete(round_id='r2', game_id='g1', black_card_uid='bc2', timestamp=datetime(2018, 3, 1, 11, 0, 0)),
            RoundComplete(round_id='r9', game_id='g2', black_card_uid='bc2', timestamp=datetime(2018, 3, 2, 9, 0, 0)),
        ])
        db.session.commit()
    return _seed


@pytest.fixture()
def seed_sessions(flask_app):
    from metrics_viewer.models import UserSession

    def _seed():
        db.session.add_all([
            UserSession(session_id='serverA_aaa111', persistent_id='u1', timestamp=datetime(2018, 3, 1, 8, 0, 0)),
            UserSession(session_id='serverB_bbb222', persistent_id='u1', timestamp=datetime(2018, 3, 1, 12, 0, 0)),
            UserSession(session_id='serverA_ccc333', persistent_id='u2', timestamp=datetime(2018, 3, 1, 9, 0, 0)),
        ])
        db.session.commit()
    return _seed


@pytest.fixture()
def fake_result():
    return FakeResult
