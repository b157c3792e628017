import logging
from collections.abc import Awaitable, Callable
from types import TracebackType

from beanie import Document

logger = logging.getLogger(__name__)

Compensation = Callable[[], Awaitable[None]]


class UnitOfWork:
    """Groups document writes so that they either all persist or are all undone.

    Each write goes to the database immediately and records a compensating action: inserted
    documents are deleted again, saved or deleted documents are restored to the state they had in
    the database before the write. Leaving the `async with` block normally commits by discarding the
    compensations. Leaving it with an exception runs them in reverse order and lets the exception
    propagate.

    Usage::

        async with UnitOfWork() as uow:
            team = await uow.insert(models.Team(name="Alpha"))
            await uow.save(user)
    """

    def __init__(self) -> None:
        self._compensations: list[Compensation] = []
        self._open = False

    async def __aenter__(self) -> "UnitOfWork":
        if self._open:
            raise RuntimeError("Unit of work already in progress")
        self._open = True
        self._compensations = []
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self._open = False
        if exc_type is None:
            self._compensations = []
        else:
            await self.rollback()
        return False

    @property
    def pending(self) -> int:
        return len(self._compensations)

    def _check_open(self) -> None:
        if not self._open:
            raise RuntimeError("Writes must happen inside `async with UnitOfWork()`")

    async def insert(self, document: Document) -> Document:
        self._check_open()
        await document.insert()
        self._compensations.append(_delete_by_id(type(document), document.id))
        return document

    async def save(self, document: Document) -> Document:
        self._check_open()
        if document.id is None:
            return await self.insert(document)
        previous = await type(document).get(document.id)
        await document.save()
        if previous is None:
            self._compensations.append(_delete_by_id(type(document), document.id))
        else:
            self._compensations.append(previous.save)
        return document

    async def delete(self, document: Document) -> None:
        self._check_open()
        previous = await type(document).get(document.id)
        await document.delete()
        if previous is not None:
            self._compensations.append(previous.insert)

    async def rollback(self) -> None:
        compensations, self._compensations = self._compensations, []
        logger.warning("Rolling back %d write(s)", len(compensations))
        for compensation in reversed(compensations):
            try:
                await compensation()
            except Exception:
                # Keep undoing the remaining writes, the original error is re-raised by __aexit__.
                logger.exception("Compensating write failed during rollback")


def _delete_by_id(model: type[Document], id) -> Compensation:
    async def f() -> None:
        document = await model.get(id)
        if document is not None:
            await document.delete()

    return f
