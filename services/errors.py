# services/errors.py


class OrderQueryError(ValueError):
    """잘못된 쿼리 스펙. 쿼리 전체가 실패한다 (부분 결과 없음)."""


class InvalidFilterKind(OrderQueryError):
    def __init__(self, value):
        super().__init__(f"unexpected filter kind: {value}")
        self.value = value


class InvalidSortDirection(OrderQueryError):
    def __init__(self, value):
        super().__init__(f"unexpected sort direction: {value}")
        self.value = value


class FieldNotFilterable(OrderQueryError):
    def __init__(self, value):
        super().__init__(f"field is not filterable: {value}")
        self.value = value


class FieldNotSortable(OrderQueryError):
    def __init__(self, value):
        super().__init__(f"field is not sortable: {value}")
        self.value = value


class InvalidFilterValue(OrderQueryError):
    def __init__(self, field, value):
        super().__init__(f"invalid filter value for {field}: {value!r}")
        self.field = field
        self.value = value
