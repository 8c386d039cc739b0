from metrics_viewer import db

# Tables are owned by the game server; the viewer only reads them.


class BlackCard(db.Model):
    __tablename__ = 'black_card'
    uid = db.Column(db.String(64), primary_key=True)
    text = db.Column(db.Text, nullable=False)
    watermark = db.Column(db.String(64), nullable=False, default='')
    pick = db.Column(db.SmallInteger, nullable=False, default=1)
    draw = db.Column(db.SmallInteger, nullable=False, default=0)


class RoundComplete(db.Model):
    __tablename__ = 'round_complete'
    round_id = db.Column(db.String(64), primary_key=True)
    game_id = db.Column(db.String(64), nullable=False, index=True)
    black_card_uid = db.Column(db.String(64), db.ForeignKey('black_card.uid'), nullable=False)
    timestamp = db.Column(db.DateTime, nullable=False)  # UTC

    black_card = db.relationship('BlackCard')


class UserSession(db.Model):
    __tablename__ = 'user_session'
    session_id = db.Column(db.String(128), primary_key=True)
    persistent_id = db.Column(db.String(64), nullable=False, index=True)
    timestamp = db.Column(db.DateTime, nullable=False)  # UTC
