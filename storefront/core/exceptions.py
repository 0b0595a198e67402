"""
커스텀 예외 정의

서비스 계층에서 발생하는 도메인 예외입니다. 라우터가 HTTP 응답으로 변환합니다.
"""


class UserAlreadyExistsException(Exception):
    """
    이미 사용 중인 이메일로 가입하거나 이메일을 변경할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, email: str):
        self.email = email
        self.message = f"User with email '{email}' already exists"
        super().__init__(self.message)


class InvalidCredentialsException(Exception):
    """
    인증 실패 시 발생하는 예외 (잘못된 비밀번호, 유효하지 않은 토큰 등)

    HTTP Status Code: 401 Unauthorized
    """

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(self.message)


class UserNotFoundException(Exception):
    """
    사용자를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, identifier):
        self.identifier = identifier
        self.message = f"User '{identifier}' not found"
        super().__init__(self.message)


class PermissionDeniedException(Exception):
    """
    역할이나 소유권 때문에 요청한 작업이 허용되지 않을 때 발생하는 예외

    HTTP Status Code: 403 Forbidden
    """

    def __init__(self, message: str = "You do not have permission to perform this action"):
        self.message = message
        super().__init__(self.message)


class CategoryNotFoundException(Exception):
    """
    카테고리를 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, category_id: int):
        self.category_id = category_id
        self.message = f"Category with id {category_id} not found"
        super().__init__(self.message)


class CategoryAlreadyExistsException(Exception):
    """
    이미 존재하는 이름으로 카테고리를 만들 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, name: str):
        self.name = name
        self.message = f"Category with name '{name}' already exists"
        super().__init__(self.message)


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        self.message = f"Product with id {product_id} not found"
        super().__init__(self.message)


class CartItemNotFoundException(Exception):
    """
    장바구니에 없는 상품을 수정할 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        self.message = f"Product {product_id} is not in the cart"
        super().__init__(self.message)


class EmptyCartException(Exception):
    """
    빈 장바구니로 주문할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self):
        self.message = "Cannot check out an empty cart"
        super().__init__(self.message)


class InsufficientStockException(Exception):
    """
    장바구니 수량만큼 재고가 없을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.message = (
            f"Insufficient stock for product {product_id}: "
            f"requested {requested}, available {available}"
        )
        super().__init__(self.message)


class LockAcquisitionException(Exception):
    """
    재고 락 획득에 실패했을 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, resource: str, message: str = "Failed to acquire lock"):
        self.resource = resource
        self.message = f"{message} for resource: {resource}"
        super().__init__(self.message)


class OrderNotFoundException(Exception):
    """
    요청자의 주문(또는 주문 항목)을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, order_id: int, kind: str = "Order"):
        self.order_id = order_id
        self.message = f"{kind} with id {order_id} not found"
        super().__init__(self.message)


class InvalidStatusTransitionException(Exception):
    """
    주문 항목 상태를 이전 단계로 되돌리려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        self.message = f"Cannot change status from '{current}' to '{requested}'"
        super().__init__(self.message)


class ReviewNotAllowedException(Exception):
    """
    아직 배송되지 않은 주문 항목에 리뷰를 작성할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, status: str):
        self.status = status
        self.message = f"Items can only be reviewed after shipping (current status: {status})"
        super().__init__(self.message)


class ReviewAlreadyExistsException(Exception):
    """
    같은 주문의 같은 상품에 이미 리뷰가 있을 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, order_id: int, product_id: int):
        self.order_id = order_id
        self.product_id = product_id
        self.message = (
            f"A review for product {product_id} in order {order_id} already exists"
        )
        super().__init__(self.message)


class ProductSearchException(Exception):
    """
    AI 상품 검색이 결과를 만들지 못했을 때 발생하는 예외

    HTTP Status Code: 500 Internal Server Error
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ProductInUseException(Exception):
    """
    이미 주문된 상품을 삭제하려 할 때 발생하는 예외

    HTTP Status Code: 409 Conflict
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        self.message = (
            f"Product {product_id} has been ordered and cannot be deleted; "
            f"set its stock to 0 instead"
        )
        super().__init__(self.message)


class SelfDeletionException(Exception):
    """
    관리자가 자기 계정을 삭제하려 할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self):
        self.message = "Admins cannot delete their own account"
        super().__init__(self.message)
