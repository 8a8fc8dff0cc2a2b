from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class WarehouseORM(Base):
    """Warehouse ORM model.

    ``version`` is the mapper's version counter: every flushed UPDATE carries
    ``WHERE version = <loaded version>`` and bumps it by one, so a write based
    on a stale read matches no row.
    """
    __tablename__ = 'warehouses'

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_unit_code = Column(String(64), nullable=False, unique=True, index=True)
    location = Column(String(64), nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    stock = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False)
    archived_at = Column(DateTime, nullable=True)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
