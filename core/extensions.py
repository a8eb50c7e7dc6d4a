from core.imports import Swagger, SQLAlchemy, CORS, Migrate

db = SQLAlchemy()
migrate = Migrate()
swagger = Swagger()
cors = CORS()
