from flask import Blueprint, jsonify, request
from werkzeug.exceptions import NotFound

from iranid.adapters.resources.banks_repo import BankRepository
from iranid.adapters.resources.hometowns_repo import HometownRepository
from iranid.common.utils import normalize_persian

bp = Blueprint('reference', __name__)


@bp.route('/', methods=['GET'])
def index():
    return jsonify({
        'service': 'iranid',
        'banks': len(BankRepository().get_all()),
        'hometowns': len(HometownRepository().get_all()),
    })


@bp.route('/banks', methods=['GET'])
def banks():
    repo = BankRepository()
    code = request.args.get('code')
    if code:
        bank = repo.find_by_code(code)
        if bank is None:
            raise NotFound(f'No bank found for code: {code}')
        return jsonify([bank.to_dict()])
    return jsonify([b.to_dict() for b in repo.get_all()])


@bp.route('/hometowns', methods=['GET'])
def hometowns():
    repo = HometownRepository()
    code = request.args.get('code')
    province = request.args.get('province')

    if code:
        found = repo.find_all_by_code(code)
        if province:
            province = normalize_persian(province)
            found = [h for h in found if h.province == province]
    elif province:
        found = repo.find_all_by_province(province)
    else:
        found = repo.get_all()
    return jsonify([h.to_dict() for h in found])
