class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """予約・顧客・客室が見つからない場合"""

    pass


class ValidationException(DomainException):
    """入力値が業務上の前提を満たさない場合（必須項目の欠落、日付の前後関係など）"""

    pass


class ConflictException(DomainException):
    """同じ客室の予約期間が重複する場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass
