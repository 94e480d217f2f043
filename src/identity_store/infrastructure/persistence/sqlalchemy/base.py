"""SQLAlchemy mapper registry for the default identity schema.

Identity entities are plain classes mapped imperatively, so the registry and
its metadata are shared by the default models and by table creation.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

metadata = MetaData()
mapper_registry = registry(metadata=metadata)
