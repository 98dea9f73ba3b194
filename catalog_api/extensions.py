from flask_sqlalchemy import SQLAlchemy

from catalog_api.auth import TokenAuth

db = SQLAlchemy()
token_auth = TokenAuth()
