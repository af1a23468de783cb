from flask import Blueprint, jsonify
from werkzeug.exceptions import NotFound

from iranid.common.errors import EmptyInputError
from iranid.services.card_number_service import card_number_service

bp = Blueprint('card_number', __name__, url_prefix='/card-number')


@bp.route('/<value>/validate', methods=['GET'])
def validate(value):
    try:
        card_number = card_number_service.normalize(value)
    except EmptyInputError as e:
        return jsonify({'card_number': None, 'valid': False, 'error': e.message})

    error = card_number_service.check(card_number)
    return jsonify({
        'card_number': card_number,
        'valid': error is None,
        'error': error.message if error else None,
    })


@bp.route('/<value>/bank', methods=['GET'])
def bank(value):
    # typed input such as '۶۰۳۷ ۷۰۱۶ ...' is folded to plain digits first
    card_number = card_number_service.normalize(value)
    found = card_number_service.find_bank(card_number)
    if found is None:
        raise NotFound(f'No bank found for card number: {card_number}')
    return jsonify(found.to_dict())
