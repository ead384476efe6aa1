"""
cosme-review-api/app.py
Point d'entrée : application FastAPI, routes /api, gestion des erreurs
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from api.endpoints import user_router, product_router, review_router
from api.errors import register_exception_handlers
from infrastructure.database.init_db import init_db
from logging_config import setup_logging

SERVICE_NAME = "cosme-review-api"
API_VERSION = "1.0.0"

# JWT_SECRET manquant -> ConfigError, le serveur ne démarre pas
config = Config()

logger = setup_logging(
    log_level=config.log_level,
    log_file=config.log_file_path if config.log_file_enabled else None,
    colored=config.log_colored
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Création du schéma (et seed éventuel) au démarrage"""
    logger.info(f"🚀 Démarrage de {SERVICE_NAME} {API_VERSION}")
    # Ne pas journaliser les identifiants éventuels de l'URL
    logger.info(f"📊 Database: {config.database_url.split('@')[-1]}")
    logger.info(f"🔑 JWT {config.jwt_algorithm}, expiration {config.jwt_expire_minutes} min")

    init_db(seed=config.seed_demo_data)
    app.state.config = config

    yield

    logger.info(f"🛑 Arrêt de {SERVICE_NAME}")


app = FastAPI(
    title="Cosme Review API",
    description="API d'avis sur les produits cosmétiques (utilisateurs, produits, avis)",
    version=API_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

for router in (user_router, product_router, review_router):
    app.include_router(router, prefix="/api")


@app.get("/", tags=["Root"])
def root():
    """Informations sur le service"""
    return {
        "service": SERVICE_NAME,
        "version": API_VERSION,
        "status": "operational",
        "documentation": app.docs_url
    }


@app.get("/health", tags=["System"])
def health_check():
    """Sonde de santé (Docker, Kubernetes)"""
    return {"status": "healthy", "service": SERVICE_NAME}


if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    uvicorn.run(
        "app:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
        log_config=get_uvicorn_log_config(log_level=config.log_level)
    )
