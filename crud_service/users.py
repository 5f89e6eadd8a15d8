from flask import Blueprint, request

from . import store
from .forms import UserForm, parse_id
from .responses import envelope, listing, instrumented

users = Blueprint('users', __name__, url_prefix='/user')


@users.route('/get/<user_id>', methods=['GET'])
@instrumented
def get_user(user_id):
    user = store.get_user(parse_id(user_id, 'user'))
    return envelope(user.to_dict(), message="user found")


@users.route('/list', methods=['GET'])
@instrumented
def list_users():
    return listing(store.list_users(), "users found")


@users.route('/create', methods=['POST'])
@instrumented
def create_user():
    form = UserForm.for_create(request.values)
    user = store.create_user(form)
    return envelope(user.to_dict(), message="user created successfully")


@users.route('/update/<user_id>', methods=['PATCH'])
@instrumented
def update_user(user_id):
    user = store.get_user(parse_id(user_id, 'user'))
    form = UserForm.for_update(request.values)
    store.update_user(user, form.changes())
    return envelope(user.to_dict(), message="user updated successfully")


@users.route('/delete/<user_id>', methods=['DELETE'])
@instrumented
def delete_user(user_id):
    user = store.get_user(parse_id(user_id, 'user'))
    store.delete_user(user)
    return envelope(message="user deleted successfully")
