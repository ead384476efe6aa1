"""
Initialisation de la base de données
"""

import logging
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from infrastructure.database.session import engine as default_engine, SessionLocal
from infrastructure.database.models import Base, UserModel, ProductModel
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProductRepository
)
from infrastructure.security.password_hasher import PasswordHasher
from application.services.user_service import UserService
from application.services.product_service import ProductService

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

DEMO_USERS = [
    ("Alice", "alice@example.com"),
    ("Bob", "bob@example.com"),
    ("Charlie", "charlie@example.com"),
]

DEMO_PRODUCTS = [
    ("Product 1", "Manufacturer 1", "skin_care", ["Ingredient 1", "Ingredient 2"]),
    ("Product 2", "Manufacturer 2", "skin_care", ["Ingredient 3", "Ingredient 4"]),
    ("Product 3", "Manufacturer 3", "skin_care", ["Ingredient 5", "Ingredient 6"]),
]


def create_tables(engine: Engine = None) -> None:
    """Crée les tables si elles n'existent pas"""
    Base.metadata.create_all(bind=engine or default_engine)
    logger.info("✅ Tables de base de données créées")


def seed_demo_data(db: Session) -> None:
    """Insère les utilisateurs et produits de démonstration (si la base est vide)"""
    user_service = UserService(SQLAlchemyUserRepository(db), PasswordHasher())
    product_service = ProductService(SQLAlchemyProductRepository(db))

    if db.query(UserModel).count() == 0:
        for name, email in DEMO_USERS:
            user_service.register(name, email, DEMO_PASSWORD)
        logger.info(f"✅ {len(DEMO_USERS)} utilisateurs de démonstration créés (mot de passe '{DEMO_PASSWORD}')")
    else:
        logger.info("Utilisateurs déjà présents, seed ignoré.")

    if db.query(ProductModel).count() == 0:
        for name, manufacturer, category, ingredients in DEMO_PRODUCTS:
            product_service.create_product(name, manufacturer, category, ingredients)
        logger.info(f"✅ {len(DEMO_PRODUCTS)} produits de démonstration créés")
    else:
        logger.info("Produits déjà présents, seed ignoré.")


def init_db(seed: bool = False) -> None:
    """Initialise la base de données (tables, puis données de démonstration si demandé)"""
    create_tables()

    if not seed:
        return

    db = SessionLocal()
    try:
        seed_demo_data(db)
    finally:
        db.close()
