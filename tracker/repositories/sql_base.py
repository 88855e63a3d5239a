import logging
from typing import Callable, TypeVar

from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from tracker.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyRepository:
    """Shared session handling for the relational repositories"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fetch(self, statement: Executable, load: Callable[[Result], T]) -> T:
        """Execute a read and materialize rows with ``load``.

        Rows are turned into objects inside the guarded block: a stored enum
        value that no longer maps to a member raises LookupError there.
        """
        try:
            result = await self.session.execute(statement)
            return load(result)
        except (SQLAlchemyError, LookupError) as e:
            logger.error(f"❌ Query failed: {e}")
            raise DatabaseError(e) from e

    async def _write(self, statement: Executable) -> int:
        """Execute and commit a write, returning the affected row count"""
        try:
            result = await self.session.execute(statement)
            rowcount = result.rowcount
            await self.session.commit()
            return rowcount
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ Write failed: {e}")
            raise DatabaseError(e) from e
