from flask import current_app, jsonify, render_template, request
from flask.views import MethodView
from sqlalchemy.exc import SQLAlchemyError

# Errors a row can raise once the cursor is already streaming
ROW_ERRORS = (SQLAlchemyError, ValueError, TypeError, AttributeError)


def wants_html() -> bool:
    # Plain substring match, so "text/html;q=0.1" still counts as HTML
    return 'text/html' in request.headers.get('Accept', '')


def respond(template: str, payload, **context):
    """Render ``<template>.html`` for browsers, otherwise return ``payload`` as JSON."""
    if wants_html():
        return render_template(f'{template}.html', **context)
    return jsonify(payload)


def return_error(status: int, message: str):
    current_app.logger.error(f"[error] {message}")
    return jsonify({'error': message}), status


class QueryView(MethodView):
    """A read-only view that owns one compiled statement.

    Flask builds a single instance when the view is registered, so the
    statement is compiled once and reused for every request. Subclasses
    provide ``build_statement`` and ``make_record``.
    """

    init_every_request = False

    def __init__(self, db):
        self.db = db
        self.statement = self.build_statement()

    def build_statement(self):
        raise NotImplementedError

    def make_record(self, row):
        raise NotImplementedError

    def query(self, params: dict):
        return self.db.session.execute(self.statement, params)

    def collect(self, result, what: str) -> list:
        """Scan rows into records, keeping whatever was read before a failure."""
        records = []
        try:
            for row in result:
                records.append(self.make_record(row))
        except ROW_ERRORS as exc:
            current_app.logger.error(f"Error while iterating over {what}: {exc!r}")
        finally:
            result.close()
        return records
