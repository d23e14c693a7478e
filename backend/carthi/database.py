import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from fastapi import Request

from carthi.leads.models import Lead
from carthi.leads.history_models import LeadHistory

logger = logging.getLogger(__name__)

# Leads live in memory only. The store keeps them in dashboard order
# (newest intake first) and serializes every mutation behind one lock.

class LeadStore:
    def __init__(self, leads: Optional[List[Lead]] = None):
        self._leads: List[Lead] = list(leads or [])
        self._history: Dict[str, List[LeadHistory]] = {}
        self._lock = threading.RLock()
        self.version = 0

    def all(self) -> List[Lead]:
        """Deep copies of every lead, so readers never see a half-applied update."""
        with self._lock:
            return [lead.model_copy(deep=True) for lead in self._leads]

    def get(self, lead_id: str) -> Optional[Lead]:
        with self._lock:
            for lead in self._leads:
                if lead.id == lead_id:
                    return lead
        return None

    def next_id(self) -> str:
        with self._lock:
            highest = 0
            for lead in self._leads:
                suffix = lead.id[1:]
                if suffix.isdigit():
                    highest = max(highest, int(suffix))
            return f"L{highest + 1:03d}"

    def add(self, lead: Lead) -> Lead:
        with self.transaction():
            if self.get(lead.id) is not None:
                raise ValueError(f"Lead {lead.id} already exists")
            self._leads.insert(0, lead)
        return lead

    @contextmanager
    def transaction(self) -> Iterator["LeadStore"]:
        """Hold the store lock for one mutation and bump the version afterwards."""
        with self._lock:
            yield self
            self.version += 1

    def add_history(self, entry: LeadHistory) -> LeadHistory:
        with self._lock:
            self._history.setdefault(entry.lead_id, []).append(entry)
        return entry

    def history(self, lead_id: str) -> List[LeadHistory]:
        with self._lock:
            return list(reversed(self._history.get(lead_id, [])))


def create_store(seed: bool = True) -> LeadStore:
    if not seed:
        return LeadStore()
    from carthi.seed import demo_leads

    store = LeadStore(demo_leads())
    logger.info("Lead store seeded with %d demo leads", len(store.all()))
    return store

def get_store(request: Request) -> LeadStore:
    return request.app.state.store
