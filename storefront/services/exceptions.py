class StorefrontError(Exception):
    """Базовая ошибка сервиса. status_code - HTTP-статус для ответа клиенту"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    """Некорректный запрос. Возникает до обращения к БД"""

    status_code = 400


class ProductNotFoundError(StorefrontError):
    """Товар из позиции заказа отсутствует в каталоге"""

    status_code = 400

    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found.")
        self.product_id = product_id


class StoreError(StorefrontError):
    """Сбой соединения, запроса или коммита"""

    status_code = 500
