from flask import Blueprint

from . import store
from .forms import parse_id
from .responses import envelope, listing, instrumented

relations = Blueprint('relations', __name__)


@relations.route('/user-products/<user_id>', methods=['GET'])
@instrumented
def user_products(user_id):
    user = store.get_user(parse_id(user_id, 'user'))
    return listing(store.products_for_user(user.id), "products found", empty_message=None)


@relations.route('/product-owner/<product_id>', methods=['GET'])
@instrumented
def product_owner(product_id):
    product = store.get_product(parse_id(product_id, 'product'))
    owner = store.get_user(product.user_id)
    return envelope(owner.to_dict(), message="user found")
