"""Simple data structures for the gradient descent playground"""
from dataclasses import dataclass, field
from typing import List, Union
from enum import Enum


class ModelType(str, Enum):
    """Supported single-parameter model families"""
    INTERCEPT = "y=b"
    SLOPE = "y=a*x"


@dataclass(frozen=True)
class DataPoint:
    """Single (x, y) observation"""
    x: float
    y: float


@dataclass(frozen=True)
class InterceptParams:
    """Parameters of y = b"""
    b: float

    label = "b"

    @property
    def value(self) -> float:
        return self.b


@dataclass(frozen=True)
class SlopeParams:
    """Parameters of y = a * x"""
    a: float

    label = "a"

    @property
    def value(self) -> float:
        return self.a


ModelParams = Union[InterceptParams, SlopeParams]


@dataclass(frozen=True)
class EpochRecord:
    """Parameter value and loss after one gradient step"""
    epoch: int
    value: float
    mse: float


@dataclass
class TrainingResult:
    """Final parameters plus the per-epoch trajectory"""
    model_type: ModelType
    params: ModelParams
    trajectory: List[EpochRecord] = field(default_factory=list)


@dataclass
class TrainingConfig:
    """Gradient descent hyperparameters"""
    learning_rate: float = 0.01
    epochs: int = 100


@dataclass
class PlaygroundOutput:
    """Everything one run hands back to the UI"""
    result: TrainingResult
    table_html: str
    text: str


SAMPLE_CSV = "\n".join(["1,2.1", "2,3.9", "3,6.2", "4,7.8", "5,10.1"])
