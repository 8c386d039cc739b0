from flask import current_app
from sqlalchemy import bindparam, select
from sqlalchemy.exc import SQLAlchemyError

from metrics_viewer.api.responses import QueryView, respond, return_error
from metrics_viewer.models import UserSession
from metrics_viewer.records import SessionRecord, UserSessions, to_epoch


class UserSessionsView(QueryView):
    """Login sessions of one persistent user id, newest first."""

    def build_statement(self):
        current_app.logger.debug("[user] Preparing statements for user handler")
        return (
            select(UserSession.session_id, UserSession.timestamp)
            .where(UserSession.persistent_id == bindparam('user_id'))
            .order_by(UserSession.timestamp.desc())
        )

    def make_record(self, row):
        return SessionRecord(
            session_id=row.session_id,
            login_timestamp=to_epoch(row.timestamp),
        )

    def get(self, user_id):
        try:
            result = self.query({'user_id': user_id})
        except SQLAlchemyError as exc:
            return return_error(500, f"Unable to query for user with id {user_id}: {exc}")
        user = UserSessions(tuple(self.collect(result, f"sessions for user {user_id}")))
        return respond('user', user.to_dict(), user_id=user_id, user=user)
