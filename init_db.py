from showcase.config import settings
from showcase.database import Database

settings.ensure_directories()

# Initialize database
db = Database(settings.database_url, echo=settings.echo_sql)

# Create tables
db.create_tables()
db.dispose()
