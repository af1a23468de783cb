import logging
import os

import click
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from iranid.common.errors import EmptyInputError, ParseError, ValidationError
from iranid.config.settings import Config


def create_app(test_config=None):
    """
    اپلیکیشن Flask را می‌سازد.
    سرویس‌های کدملی، کارت بانکی و نرمال‌سازی متن را به صورت JSON در دسترس می‌گذارد.
    """
    app = Flask(__name__)

    # --------- تنظیمات کانفیگ ---------
    # test_config can be a mapping or a config class such as TestConfig
    app.config.from_object(Config)
    if isinstance(test_config, dict):
        app.config.from_mapping(test_config)
    elif test_config is not None:
        app.config.from_object(test_config)

    app.json.ensure_ascii = bool(app.config.get('JSON_AS_ASCII', False))

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # --------- خطاها ---------
    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({'error': e.message, 'kind': type(e).__name__}), 400

    @app.errorhandler(ParseError)
    def handle_parse_error(e):
        return jsonify({'error': e.message, 'kind': type(e).__name__}), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description, 'kind': type(e).__name__}), e.code

    # --------- دستورات CLI ---------
    from iranid.common.utils import normalize_persian
    from iranid.services.card_number_service import card_number_service
    from iranid.services.national_id_service import national_id_service

    @app.cli.command('check-national-id')
    @click.argument('value')
    def check_national_id(value):
        error = national_id_service.check(value)
        if error is not None:
            click.echo(f'{type(error).__name__}: {error.message}')
            raise SystemExit(1)

        normalized = national_id_service.normalize(value)
        click.echo(f'{normalized}: valid')
        for hometown in national_id_service.find_hometown(normalized):
            click.echo(f'  {hometown.province} - {hometown.city}')

    @app.cli.command('check-card-number')
    @click.argument('value')
    def check_card_number(value):
        try:
            card_number = card_number_service.normalize(value)
        except EmptyInputError as e:
            card_number, error = None, e
        else:
            error = card_number_service.check(card_number)
        if error is not None:
            click.echo(f'{type(error).__name__}: {error.message}')
            raise SystemExit(1)

        bank = card_number_service.find_bank(card_number)
        click.echo(f'{card_number}: valid')
        if bank is not None:
            click.echo(f'  {bank.persian_name} ({bank.name})')

    @app.cli.command('normalize-text')
    @click.argument('text')
    def normalize_text(text):
        click.echo(normalize_persian(text))

    # --------- ثبت Blueprints ---------
    from iranid.api.reference import bp as reference_bp
    app.register_blueprint(reference_bp)

    from iranid.api.national_id import bp as national_id_bp
    app.register_blueprint(national_id_bp)

    from iranid.api.card_number import bp as card_number_bp
    app.register_blueprint(card_number_bp)

    from iranid.api.text import bp as text_bp
    app.register_blueprint(text_bp)

    return app


# Expose a WSGI application callable for production servers (Gunicorn, uWSGI, etc.)
def get_wsgi_app():
    """Get WSGI app for production servers like Gunicorn."""
    return create_app()


if __name__ == "__main__":
    application = create_app()
    port = int(os.environ.get('PORT', 8080))
    application.run(
        debug=False,
        host="0.0.0.0",
        port=port,
        use_reloader=False,
    )
