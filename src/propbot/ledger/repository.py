# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant storage interface.

The ledger service depends only on ``TenantRepository``; applications plug in
whatever document store they use. ``InMemoryTenantRepository`` backs tests
and single-process use.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Dict, List

from ..core.base.tenant import Tenant


class TenantRepository(ABC):
    """Abstract store of tenant records keyed by ``Tenant.uid``."""

    @abstractmethod
    def get(self, uid: uuid.UUID) -> Tenant:
        """Return the tenant with ``uid``. Raises KeyError if unknown."""

    @abstractmethod
    def list(self) -> List[Tenant]:
        """Return all tenants, most recently added first."""

    @abstractmethod
    def add(self, tenant: Tenant) -> None:
        """Store a new tenant. Raises ValueError if the uid already exists."""

    @abstractmethod
    def save(self, tenant: Tenant) -> None:
        """Replace an existing tenant. Raises KeyError if unknown."""

    @abstractmethod
    def delete(self, uid: uuid.UUID) -> None:
        """Remove a tenant. Raises KeyError if unknown."""

    def __contains__(self, uid: uuid.UUID) -> bool:
        try:
            self.get(uid)
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return len(self.list())


class InMemoryTenantRepository(TenantRepository):
    """Dict-backed repository. Last writer wins on concurrent saves."""

    def __init__(self):
        self._tenants: Dict[uuid.UUID, Tenant] = {}

    def get(self, uid: uuid.UUID) -> Tenant:
        try:
            return self._tenants[uid]
        except KeyError:
            raise KeyError(f"Tenant {uid} not found") from None

    def list(self) -> List[Tenant]:
        return list(reversed(self._tenants.values()))

    def add(self, tenant: Tenant) -> None:
        if tenant.uid in self._tenants:
            raise ValueError(f"Tenant {tenant.uid} already exists")
        self._tenants[tenant.uid] = tenant

    def save(self, tenant: Tenant) -> None:
        if tenant.uid not in self._tenants:
            raise KeyError(f"Tenant {tenant.uid} not found")
        self._tenants[tenant.uid] = tenant

    def delete(self, uid: uuid.UUID) -> None:
        if uid not in self._tenants:
            raise KeyError(f"Tenant {uid} not found")
        del self._tenants[uid]

    def __len__(self) -> int:
        return len(self._tenants)
