"""成功/失敗を表すタグ付きResult型"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from src.domain.diagnostics import Diagnostic

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """成功結果"""

    value: T
    success: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    """失敗結果（診断情報と任意の原因例外）"""

    diagnostic: Diagnostic
    error: BaseException | None = None
    success: Literal[False] = False

    @property
    def message(self) -> str:
        if self.error is None:
            return self.diagnostic.message
        return f"{self.diagnostic.message} ({self.error})"


Result = Success[T] | Failure


def success(value: T) -> Success[T]:
    return Success(value)


def fail(diagnostic: Diagnostic, error: BaseException | None = None) -> Failure:
    return Failure(diagnostic=diagnostic, error=error)


def assert_success(result: "Result[T]") -> T:
    """
    成功結果から値を取り出す

    Raises:
        RuntimeError: 失敗結果だった場合
    """
    if isinstance(result, Failure):
        raise RuntimeError(f"Unhandled error: {result.diagnostic.message}") from result.error
    return result.value
