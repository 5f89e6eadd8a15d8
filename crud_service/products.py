from flask import Blueprint, request

from . import store
from .forms import ProductForm, parse_id, parse_int, parse_optional_int
from .responses import envelope, listing, instrumented

products = Blueprint('products', __name__, url_prefix='/product')


@products.route('/get/<product_id>', methods=['GET'])
@instrumented
def get_product(product_id):
    product = store.get_product(parse_id(product_id, 'product'))
    return envelope(product.to_dict(), message="product found")


@products.route('/list', methods=['GET'])
@instrumented
def list_products():
    return listing(store.list_products(), "products found")


@products.route('/create', methods=['POST'])
@instrumented
def create_product():
    user_id = parse_int(request.values.get('user_id'), "invalid user ID format")
    # the owner must exist before anything is written
    owner = store.get_user(user_id)
    form = ProductForm.for_create(request.values, owner.id)
    product = store.create_product(form)
    return envelope(product.to_dict(), message="product created successfully")


@products.route('/update/<product_id>', methods=['PATCH'])
@instrumented
def update_product(product_id):
    product = store.get_product(parse_id(product_id, 'product'))
    owner_id = parse_optional_int(request.values, 'user_id', "invalid user ID format")
    if owner_id is not None:
        store.get_user(owner_id)
    form = ProductForm.for_update(request.values)
    store.update_product(product, form.changes())
    return envelope(product.to_dict(), message="product updated successfully")


@products.route('/delete/<product_id>', methods=['DELETE'])
@instrumented
def delete_product(product_id):
    product = store.get_product(parse_id(product_id, 'product'))
    store.delete_product(product)
    return envelope(message="product deleted successfully")
