from flask import current_app
from sqlalchemy import bindparam, select
from sqlalchemy.exc import SQLAlchemyError

from metrics_viewer.api.responses import QueryView, respond, return_error
from metrics_viewer.models import BlackCard, RoundComplete
from metrics_viewer.records import BlackCardSnapshot, RoundRecord, to_epoch


class GameRoundsView(QueryView):
    """Completed rounds of one game, newest first."""

    def build_statement(self):
        current_app.logger.debug("[game] Preparing statements for game handler")
        return (
            select(
                BlackCard.text,
                BlackCard.watermark,
                BlackCard.pick,
                BlackCard.draw,
                RoundComplete.round_id,
                RoundComplete.timestamp,
            )
            .join(BlackCard, BlackCard.uid == RoundComplete.black_card_uid)
            .where(RoundComplete.game_id == bindparam('game_id'))
            .order_by(RoundComplete.timestamp.desc())
        )

    def make_record(self, row):
        return RoundRecord(
            round_id=row.round_id,
            timestamp=to_epoch(row.timestamp),
            black_card=BlackCardSnapshot(
                text=row.text,
                watermark=row.watermark,
                pick=int(row.pick),
                draw=int(row.draw),
            ),
        )

    def get(self, game_id):
        try:
            result = self.query({'game_id': game_id})
        except SQLAlchemyError as exc:
            return return_error(500, f"Unable to query for game id {game_id}: {exc}")
        rounds = self.collect(result, f"rounds for game {game_id}")
        return respond(
            'game',
            [r.to_dict() for r in rounds],
            game_id=game_id,
            rounds=rounds,
        )
