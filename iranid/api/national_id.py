from flask import Blueprint, jsonify

from iranid.services.national_id_service import national_id_service

bp = Blueprint('national_id', __name__, url_prefix='/national-id')


@bp.route('/<value>/validate', methods=['GET'])
def validate(value):
    """Validity of a national ID; never an error response."""
    error = national_id_service.check(value)
    normalized = None
    if error is None:
        normalized = national_id_service.normalize(value)
    return jsonify({
        'national_id': normalized,
        'valid': error is None,
        'error': error.message if error else None,
    })


@bp.route('/<value>/hometowns', methods=['GET'])
def hometowns(value):
    found = national_id_service.find_hometown(value)
    return jsonify([h.to_dict() for h in found])


@bp.route('/<value>', methods=['GET'])
def parse(value):
    return jsonify(national_id_service.parse(value).to_dict())
