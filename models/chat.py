# models/chat.py

from dataclasses import dataclass, field
from datetime import datetime

from models.enums import Role

GREETING = (
    'Olá! Sou Gizele Anastacio, sua Terapeuta Comportamental. Estou aqui para te apoiar '
    'na sua jornada de bem-estar e equilíbrio com a comida. Como você está se sentindo '
    'em relação à sua alimentação hoje?'
)

CONNECTION_PROBLEM = 'Houve um problema na conexão.'

@dataclass
class ChatMessage:
    role: Role
    text: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "text": self.text,
            "timestamp": self.timestamp.isoformat()
        }
