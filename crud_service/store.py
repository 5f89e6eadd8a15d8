"""Persistence adapter over the Flask-SQLAlchemy session.

Lookups raise :class:`NotFound` when no row matches; writes roll the session
back and raise :class:`PersistenceError` when the database refuses them.
"""
from sqlalchemy.exc import SQLAlchemyError

from .errors import NotFound, PersistenceError
from .logs import logger
from .metrics import WRITE_COUNT
from .model import db, User, Product


def _get(model, entity_id, entity):
    row = db.session.get(model, entity_id)
    if row is None:
        raise NotFound(f"{entity} not found")
    return row


def _commit(entity, operation):
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Failed to {operation} {entity}")
        raise PersistenceError(f"{entity} couldn't be {operation}d")
    WRITE_COUNT.labels(entity, operation).inc()


def _apply(row, changes):
    for field, value in changes.items():
        if value is not None:
            setattr(row, field, value)
    return row


def get_user(user_id):
    return _get(User, user_id, 'user')


def list_users():
    return User.query.order_by(User.id).all()


def create_user(form):
    user = User(name=form.name, email=form.email, gender=form.gender, age=form.age)
    db.session.add(user)
    _commit('user', 'create')
    return user


def update_user(user, changes):
    _apply(user, changes)
    _commit('user', 'update')
    return user


def delete_user(user):
    db.session.delete(user)
    _commit('user', 'delete')


def get_product(product_id):
    return _get(Product, product_id, 'product')


def list_products():
    return Product.query.order_by(Product.id).all()


def products_for_user(user_id):
    return Product.query.filter_by(user_id=user_id).order_by(Product.id).all()


def create_product(form):
    product = Product(user_id=form.user_id, name=form.name, price=form.price)
    db.session.add(product)
    _commit('product', 'create')
    return product


def update_product(product, changes):
    _apply(product, changes)
    _commit('product', 'update')
    return product


def delete_product(product):
    db.session.delete(product)
    _commit('product', 'delete')
