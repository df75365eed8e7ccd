class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidInputException(DomainException):
    """入力値が不正な場合（ストアへのアクセス前に検出）"""

    pass


class ResourceNotFoundException(DomainException):
    """前提となるレコードが見つからない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（存在チェック・条件付き書き込みの失敗時）"""

    pass
