from flask_sqlalchemy import SQLAlchemy

# created cars are serialized after commit without a refresh query
db = SQLAlchemy(session_options={"expire_on_commit": False})


class Car(db.Model):
    __tablename__ = "cars"
    # ids are never handed out twice, even after the table is cleared
    __table_args__ = {"sqlite_autoincrement": True}
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    brand = db.Column(db.String, nullable=False)
    model = db.Column(db.String, nullable=False)
    price = db.Column(db.String, nullable=False)

    def __init__(self, **kwargs):
        self.brand = kwargs.get("brand")
        self.model = kwargs.get("model")
        self.price = kwargs.get("price")

    def __repr__(self):
        return f"<Car {self.id} {self.brand} {self.model}>"

    def serialize(self):
        return {
            "id": self.id,
            "brand": self.brand,
            "model": self.model,
            "price": self.price
        }
