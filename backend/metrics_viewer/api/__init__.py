from metrics_viewer.api.games import GameRoundsView
from metrics_viewer.api.users import UserSessionsView

HANDLERS = (
    ('/game/<string:game_id>', 'game', GameRoundsView),
    ('/user/<string:user_id>', 'user', UserSessionsView),
)


def register_handlers(flask_app, db):
    """Build each handler once and mount it on the app."""
    with flask_app.app_context():
        for rule, endpoint, view_class in HANDLERS:
            flask_app.logger.debug(f"[{endpoint}] Registering endpoint {rule}")
            flask_app.add_url_rule(rule, view_func=view_class.as_view(endpoint, db))
