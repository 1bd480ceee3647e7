"""
BigNumber — Целое число произвольной точности

Immutable Pydantic модель знакового целого, не ограниченного машинным словом
(RSA-масштаб: 512–2048 бит и больше).

Представление:
- digits: десятичные цифры модуля, младшая первой (1234 → (4, 3, 2, 1))
- negative: True только для строго отрицательных значений

Любая операция возвращает новый экземпляр (frozen=True); операнды
не изменяются. Операторы Python отображаются на именованные методы:

    +  add            -  subtract       *  multiply
    /  quotient       // quotient       %  remainder
    divmod() divide   unary - negate    abs() absolute

ВАЖНО: / и // — усечение к нулю (как в C), а НЕ floor division Python.
Остаток имеет знак делимого: 7 % -3 == 1, -7 % 3 == -1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются валидаторами модели):
1. digits не пустой; ноль — это (0,)
2. Нет старших нулей, кроме самого нуля
3. Ноль всегда неотрицательный
4. Каждая цифра в диапазоне 0..9
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_serializer, model_validator

from src.core.math.digit_arithmetic import (
    BASE,
    MAX_DIGIT,
    InvalidModulusError,
    NoInverseError,
    add_magnitudes,
    compare_magnitudes,
    digits_from_int,
    divmod_magnitudes,
    format_decimal,
    is_zero_magnitude,
    multiply_magnitudes,
    parse_decimal,
    subtract_magnitudes,
)


# =============================================================================
# BIG NUMBER MODEL
# =============================================================================


class BigNumber(BaseModel):
    """
    Знаковое целое произвольной точности.

    Создание:
        BigNumber()                 # ноль
        BigNumber.from_int(-42)
        BigNumber.parse("+000123")  # → 123
        BigNumber.model_validate("123")

    Прямое создание через поля проверяет инварианты; ненормализованные
    цифры (старшие нули, отрицательный ноль) отклоняются.
    """

    digits: tuple[int, ...] = Field(
        default=(0,),
        min_length=1,
        description="Десятичные цифры модуля, младшая первой",
    )
    negative: bool = Field(
        default=False,
        description="Знак: True только для строго отрицательных значений",
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Валидация
    # -------------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def coerce_scalar(cls, data: Any) -> Any:
        """
        Приём десятичной строки или int вместо словаря полей.

        Позволяет использовать BigNumber как тип поля в других моделях
        и восстанавливать значение из JSON ('"123"').
        """
        if isinstance(data, bool):
            raise ValueError("BigNumber cannot be built from bool")
        if isinstance(data, str):
            digits, negative = parse_decimal(data)
            return {"digits": digits, "negative": negative}
        if isinstance(data, int):
            digits, negative = digits_from_int(data)
            return {"digits": digits, "negative": negative}
        return data

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра в диапазоне 0..9."""
        for position, digit in enumerate(v):
            if not 0 <= digit <= MAX_DIGIT:
                raise ValueError(
                    f"digit {digit} at position {position} out of range 0..{MAX_DIGIT}"
                )
        return v

    @model_validator(mode="after")
    def validate_normalized(self) -> "BigNumber":
        """
        Проверка нормализации.

        Старшие нули запрещены (кроме нуля), ноль не может быть отрицательным.
        """
        if len(self.digits) > 1 and self.digits[-1] == 0:
            raise ValueError(
                f"digits not normalized: most significant digit is zero "
                f"(length {len(self.digits)})"
            )
        if self.negative and is_zero_magnitude(self.digits):
            raise ValueError("zero cannot be negative")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigNumber":
        """
        Создание из int (любой разрядности).

        Args:
            value: Целое число

        Returns:
            BigNumber с тем же значением
        """
        digits, negative = digits_from_int(value)
        return cls(digits=tuple(digits), negative=negative)

    @classmethod
    def parse(cls, text: str) -> "BigNumber":
        """
        Разбор десятичной строки.

        Необязательный ведущий '+' или '-', далее только цифры 0-9.
        Пустая строка даёт ноль. Пробелы не удаляются.

        Args:
            text: Десятичная строка

        Returns:
            Нормализованный BigNumber ("-0" → 0, "007" → 7)

        Raises:
            ParseError: Недопустимый символ или знак без цифр

        Examples:
            >>> str(BigNumber.parse("-0042"))
            '-42'
        """
        digits, negative = parse_decimal(text)
        return cls(digits=tuple(digits), negative=negative)

    @classmethod
    def _from_magnitude(cls, digits: list[int], negative: bool) -> "BigNumber":
        # digits уже нормализованы функциями digit_arithmetic
        return cls(
            digits=tuple(digits),
            negative=negative and not is_zero_magnitude(digits),
        )

    @classmethod
    def _coerce(cls, value: Any) -> "BigNumber | None":
        if isinstance(value, BigNumber):
            return value
        # bool является подклассом int, но не числом
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        return None

    @classmethod
    def _require_operand(cls, value: Any) -> "BigNumber":
        operand = cls._coerce(value)
        if operand is None:
            raise TypeError(
                f"BigNumber operand must be BigNumber or int, got {type(value).__name__}"
            )
        return operand

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Каноническая десятичная запись.

        Без старших нулей; '-' только для ненулевых отрицательных.
        """
        return format_decimal(self.digits, self.negative)

    def is_zero(self) -> bool:
        """Значение равно нулю."""
        return is_zero_magnitude(self.digits)

    @model_serializer
    def serialize_decimal(self) -> str:
        """Сериализация только в десятичный текст."""
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigNumber({self.to_string()!r})"

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self.digits):
            value = value * BASE + digit
        return -value if self.negative else value

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        # Совпадает с hash(int): равные BigNumber и int дают один ключ dict
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "BigNumber | int") -> int:
        """
        Полный порядок по (знак, модуль).

        1. Разные знаки: отрицательное меньше
        2. Одинаковые знаки: сравнение модулей; для отрицательных
           направление инвертируется (больший модуль — меньшее значение)

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        other = self._require_operand(other)

        if self.negative != other.negative:
            return -1 if self.negative else 1

        magnitude_cmp = compare_magnitudes(self.digits, other.digits)
        return -magnitude_cmp if self.negative else magnitude_cmp

    def __eq__(self, other: object) -> bool:
        # Равенство: идентичные цифры и знак (значения всегда нормализованы)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.digits == operand.digits and self.negative == operand.negative

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare_to(operand) < 0

    def __gt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand < self

    def __le__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self > operand

    def __ge__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self < operand

    # -------------------------------------------------------------------------
    # Сложение и вычитание
    # -------------------------------------------------------------------------

    def negate(self) -> "BigNumber":
        """Смена знака (ноль остаётся неотрицательным)."""
        return self._from_magnitude(list(self.digits), not self.negative)

    def absolute(self) -> "BigNumber":
        """Модуль значения."""
        return self._from_magnitude(list(self.digits), False)

    def add(self, other: "BigNumber | int") -> "BigNumber":
        """
        Сложение.

        Знаки совпадают: складываем модули, знак общий.
        Знаки разные: из большего модуля вычитаем меньший, знак берётся
        у операнда с большим модулем (равные модули дают ноль).
        """
        other = self._require_operand(other)

        if self.negative == other.negative:
            return self._from_magnitude(
                add_magnitudes(self.digits, other.digits), self.negative
            )

        if compare_magnitudes(self.digits, other.digits) >= 0:
            return self._from_magnitude(
                subtract_magnitudes(self.digits, other.digits), self.negative
            )
        return self._from_magnitude(
            subtract_magnitudes(other.digits, self.digits), other.negative
        )

    def subtract(self, other: "BigNumber | int") -> "BigNumber":
        """Вычитание: self + (-other)."""
        return self.add(self._require_operand(other).negate())

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    def multiply(self, other: "BigNumber | int") -> "BigNumber":
        """
        Школьное умножение O(n·m).

        Результат отрицательный, если ровно один операнд отрицательный.
        """
        other = self._require_operand(other)
        return self._from_magnitude(
            multiply_magnitudes(self.digits, other.digits),
            self.negative != other.negative,
        )

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    def divide(self, other: "BigNumber | int") -> tuple["BigNumber", "BigNumber"]:
        """
        Деление с остатком (усечение к нулю).

        Гарантии:
            self == quotient * other + remainder
            |remainder| < |other|
            знак remainder совпадает со знаком self (или remainder == 0)

        Args:
            other: Делитель

        Returns:
            (quotient, remainder) за один проход деления столбиком

        Raises:
            DivisionByZeroError: Если делитель равен нулю

        Examples:
            >>> [str(x) for x in BigNumber.from_int(7).divide(-3)]
            ['-2', '1']
        """
        other = self._require_operand(other)
        quotient_digits, remainder_digits = divmod_magnitudes(self.digits, other.digits)
        quotient = self._from_magnitude(
            quotient_digits, self.negative != other.negative
        )
        remainder = self._from_magnitude(remainder_digits, self.negative)
        return quotient, remainder

    def quotient(self, other: "BigNumber | int") -> "BigNumber":
        """Частное (усечение к нулю)."""
        return self.divide(other)[0]

    def remainder(self, other: "BigNumber | int") -> "BigNumber":
        """Остаток со знаком делимого."""
        return self.divide(other)[1]

    # -------------------------------------------------------------------------
    # Модульная арифметика
    # -------------------------------------------------------------------------

    def mod_addition(
        self, other: "BigNumber | int", modulus: "BigNumber | int"
    ) -> "BigNumber":
        """
        (self + other) % modulus.

        Остаток следует правилу усечения: для отрицательной суммы
        результат отрицательный.

        Raises:
            DivisionByZeroError: Если modulus == 0
        """
        return self.add(other).remainder(modulus)

    def mod_multiplication(
        self, other: "BigNumber | int", modulus: "BigNumber | int"
    ) -> "BigNumber":
        """
        (self * other) % modulus.

        Raises:
            DivisionByZeroError: Если modulus == 0
        """
        return self.multiply(other).remainder(modulus)

    def mod_inverse(self, modulus: "BigNumber | int") -> "BigNumber":
        """
        Обратный по модулю элемент (расширенный алгоритм Евклида).

        Возвращает x из [0, modulus), такой что (self * x) % modulus == 1.

        Алгоритм:
        1. modulus == 1 → 0
        2. self приводится в [0, modulus)
        3. Пока a > 1: q = a / m; (a, m) ← (m, a % m);
           (x0, x1) ← (x1 - q·x0, x0), начиная с (x0, x1) = (0, 1)
        4. Если итоговый a (gcd) != 1 → обратного нет
        5. Отрицательный x1 сдвигается на modulus

        Args:
            modulus: Модуль (>= 1)

        Returns:
            Обратный элемент в [0, modulus)

        Raises:
            InvalidModulusError: Если modulus < 1
            NoInverseError: Если gcd(self, modulus) != 1
        """
        modulus = self._require_operand(modulus)
        if modulus.negative or modulus.is_zero():
            raise InvalidModulusError(f"modulus must be >= 1, got {modulus}")

        if modulus == ONE:
            return ZERO

        a = self.remainder(modulus)
        if a.negative:
            a = a.add(modulus)

        m = modulus
        x0, x1 = ZERO, ONE

        while a > ONE:
            if m.is_zero():
                # a делится на предыдущий модуль нацело: gcd = a > 1
                break
            q, r = a.divide(m)
            a, m = m, r
            x0, x1 = x1.subtract(q.multiply(x0)), x0

        if a != ONE:
            raise NoInverseError(
                f"{self} has no inverse modulo {modulus} (gcd = {a})"
            )

        if x1.negative:
            x1 = x1.add(modulus)

        return x1

    # -------------------------------------------------------------------------
    # Операторы Python
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigNumber":
        return self.negate()

    def __pos__(self) -> "BigNumber":
        return self

    def __abs__(self) -> "BigNumber":
        return self.absolute()

    def __add__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.multiply(self)

    def __truediv__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.quotient(operand)

    def __rtruediv__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.quotient(self)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.remainder(operand)

    def __rmod__(self, other: Any) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.remainder(self)

    def __divmod__(self, other: Any) -> tuple["BigNumber", "BigNumber"]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rdivmod__(self, other: Any) -> tuple["BigNumber", "BigNumber"]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[BigNumber] = BigNumber()
ONE: Final[BigNumber] = BigNumber.from_int(1)
