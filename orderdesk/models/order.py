"""
Estrutura de pedido padronizada usada pelo navegador de pedidos.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

# nomes dos campos no formato de troca (JSON) -> atributo do dataclass
WIRE_FIELDS = {
    "id": "id",
    "orderId": "order_id",
    "user": "user",
    "project": "project",
    "address": "address",
    "date": "date",
    "status": "status",
    "statusColor": "status_color",
}

# campos textuais que participam da busca livre
SEARCHABLE_FIELDS = ("orderId", "user", "project", "address", "status")


@dataclass(frozen=True)
class Order:
    """Pedido exibido na tabela"""
    id: Any
    order_id: str
    user: str
    project: str
    address: str
    date: str
    status: str
    status_color: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        """
        Cria um pedido a partir do formato de troca (camelCase).
        Aceita também os nomes snake_case dos atributos.
        """
        values = {}
        for wire_name, attr in WIRE_FIELDS.items():
            if wire_name in data:
                values[attr] = data[wire_name]
            elif attr in data:
                values[attr] = data[attr]
        values.setdefault("status_color", "")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        raw = asdict(self)
        return {wire_name: raw[attr] for wire_name, attr in WIRE_FIELDS.items()}

    def get_field(self, field: str) -> Any:
        """Valor de um campo pelo nome de troca (ex.: 'orderId') ou pelo atributo."""
        attr = WIRE_FIELDS.get(field, field)
        return getattr(self, attr)
