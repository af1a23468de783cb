from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from iranid.common.utils import is_persian_text, normalize_persian, to_ascii_digits

bp = Blueprint('text', __name__, url_prefix='/text')


@bp.route('/normalize', methods=['POST'])
def normalize():
    payload = request.get_json(silent=True) or {}
    text = payload.get('text')
    if not isinstance(text, str):
        raise BadRequest('متن (text) الزامی است')

    return jsonify({
        'ascii_digits': to_ascii_digits(text),
        'persian': normalize_persian(text),
        'is_persian': is_persian_text(text),
    })
