"""
Wishlist membership for an anonymous user.

The controller keeps a local set of saved product ids and mirrors every toggle
to a WishlistStore. Local state is updated optimistically; the store stays the
source of truth and wins on the next load.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Protocol, Set

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import WishlistEntry

logger = logging.getLogger(__name__)


class WishlistStore(Protocol):
    def list_product_ids(self, user_id: str) -> List[str]: ...

    def contains(self, user_id: str, product_id: str) -> bool: ...

    def add(self, user_id: str, product_id: str) -> None: ...

    def remove(self, user_id: str, product_id: str) -> None: ...


class SqlWishlistStore:
    def __init__(self, db: Session):
        self.db = db

    def list_product_ids(self, user_id: str) -> List[str]:
        stmt = (
            select(WishlistEntry.product_id)
            .where(WishlistEntry.user_id == user_id)
            .order_by(WishlistEntry.created_at, WishlistEntry.id)
        )
        return list(self.db.scalars(stmt).all())

    def contains(self, user_id: str, product_id: str) -> bool:
        stmt = select(WishlistEntry.id).where(
            WishlistEntry.user_id == user_id,
            WishlistEntry.product_id == product_id,
        )
        return self.db.scalars(stmt).first() is not None

    def add(self, user_id: str, product_id: str) -> None:
        if self.contains(user_id, product_id):
            return
        self.db.add(WishlistEntry(user_id=user_id, product_id=product_id))
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def remove(self, user_id: str, product_id: str) -> None:
        stmt = delete(WishlistEntry).where(
            WishlistEntry.user_id == user_id,
            WishlistEntry.product_id == product_id,
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise


@dataclass(frozen=True)
class ToggleResult:
    product_id: str
    in_wishlist: bool
    synced: bool
    error: Optional[str] = None


class WishlistController:
    def __init__(
        self,
        store: WishlistStore,
        user_id: str,
        product_ids: Optional[Iterable[str]] = None,
    ):
        self.store = store
        self.user_id = user_id
        self._product_ids: Set[str] = set(product_ids or ())

    @property
    def product_ids(self) -> FrozenSet[str]:
        return frozenset(self._product_ids)

    def __len__(self) -> int:
        return len(self._product_ids)

    def contains(self, product_id: str) -> bool:
        return product_id in self._product_ids

    def load(self) -> FrozenSet[str]:
        self._product_ids = set(self.store.list_product_ids(self.user_id))
        return self.product_ids

    def toggle(self, product_id: str) -> ToggleResult:
        """
        Flip membership of a product and mirror it to the store.

        The local set changes whether or not the store call succeeds. A failed
        call is logged and reported via ``synced=False`` so the caller can
        decide to ``revert``.
        """
        removing = product_id in self._product_ids
        error = None
        try:
            if removing:
                self.store.remove(self.user_id, product_id)
            else:
                self.store.add(self.user_id, product_id)
        except Exception as exc:
            error = str(exc)
            logger.warning(
                "Wishlist %s failed for user=%s product=%s: %s",
                "delete" if removing else "insert",
                self.user_id,
                product_id,
                exc,
            )

        if removing:
            self._product_ids.discard(product_id)
        else:
            self._product_ids.add(product_id)

        return ToggleResult(
            product_id=product_id,
            in_wishlist=not removing,
            synced=error is None,
            error=error,
        )

    def set_membership(self, product_id: str, member: bool) -> None:
        """Overwrite local membership for one product with a value read from the store."""
        if member:
            self._product_ids.add(product_id)
        else:
            self._product_ids.discard(product_id)

    def revert(self, result: ToggleResult) -> None:
        if result.in_wishlist:
            self._product_ids.discard(result.product_id)
        else:
            self._product_ids.add(result.product_id)
