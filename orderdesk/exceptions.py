"""
Exceções do núcleo de navegação de pedidos.
"""

from typing import Dict


class OrderDeskError(Exception):
    """Erro base do orderdesk"""


class SnapshotPreconditionError(OrderDeskError):
    """Snapshot ausente ou sem coleção de pedidos. Erro fatal, não é recuperado."""


class OrderValidationError(OrderDeskError):
    """Formulário de novo pedido inválido."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(f"Pedido inválido: {', '.join(sorted(self.errors))}")


class DuplicateOrderError(OrderDeskError):
    """Já existe um pedido com o mesmo id no store."""
