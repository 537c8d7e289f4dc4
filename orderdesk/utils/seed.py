"""
Snapshot inicial de pedidos: arquivo JSON ({"data": [...]}) ou dados de demonstração.
"""

import json
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

_DEMO_USERS = [
    "Natali Craig", "Kate Morrison", "Drew Cano", "Orlando Diggs", "Andi Lane",
    "Sarah Johnson", "Michael Brown", "Emily Davis", "David Wilson", "Lisa Anderson",
]
_DEMO_PROJECTS = ["Landing Page", "CRM Admin pages", "Client Project", "Admin Dashboard", "App Landing"]
_DEMO_ADDRESSES = [
    "Meadow Lane Oakland", "Larry San Francisco", "Bagwell Avenue Ocala",
    "Washburn Baton Rouge", "Nest Lane Olivette",
]
_DEMO_STATUSES = [
    ("In Progress", "purple"),
    ("Completed", "green"),
    ("Pending", "blue"),
    ("Approved", "orange"),
    ("Rejected", "gray"),
]
_DEMO_DATES = ["Just now", "2 minutes ago", "1 hour ago", "Yesterday", "Feb 2, 2023"]


def demo_snapshot(count: int = 25) -> Dict[str, List[Dict[str, Any]]]:
    data = []
    for i in range(1, count + 1):
        status, color = _DEMO_STATUSES[i % len(_DEMO_STATUSES)]
        data.append({
            "id": i,
            "orderId": f"#CM{9800 + i}",
            "user": _DEMO_USERS[i % len(_DEMO_USERS)],
            "project": _DEMO_PROJECTS[i % len(_DEMO_PROJECTS)],
            "address": _DEMO_ADDRESSES[i % len(_DEMO_ADDRESSES)],
            "date": _DEMO_DATES[i % len(_DEMO_DATES)],
            "status": status,
            "statusColor": color,
        })
    return {"data": data}


def load_snapshot(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Carrega o snapshot do arquivo informado; sem arquivo, usa os dados de demonstração.
    Erros de leitura ou JSON inválido são propagados.
    """
    if not path:
        return demo_snapshot()
    with open(path, encoding="utf-8") as fh:
        snapshot = json.load(fh)
    logger.info(f"Snapshot carregado de {path}")
    return snapshot
