from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Column, Integer, String, ForeignKey, event
from sqlalchemy.orm import relationship

# responses serialize the in-memory rows after commit
db = SQLAlchemy(session_options={"expire_on_commit": False})


class User(db.Model):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, default='')
    email = Column(String(255), nullable=False, default='')
    gender = Column(String(50), nullable=False, default='')
    age = Column(Integer, nullable=False, default=0)
    products = relationship('Product', backref='user', lazy=True, cascade='all, delete-orphan')

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "gender": self.gender,
            "age": self.age
        }

    def __repr__(self):
        return f'<User {self.id} {self.name}>'


class Product(db.Model):
    __tablename__ = 'products'
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id', onupdate='CASCADE', ondelete='CASCADE'),
                     nullable=False, index=True)
    name = Column(String(255), nullable=False, default='')
    price = Column(Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "price": self.price
        }

    def __repr__(self):
        return f'<Product {self.id} {self.name}>'


def _foreign_keys_on(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine):
    """SQLite only enforces ON DELETE CASCADE when each connection opts in."""
    if engine.dialect.name == 'sqlite' and not event.contains(engine, "connect", _foreign_keys_on):
        event.listen(engine, "connect", _foreign_keys_on)
