class RecordStoreError(Exception):
    """Хранилище недоступно или отклонило запись.

    Не фатальна: клиент показывает сообщение и может повторить сохранение.
    """

    def __init__(self, message: str = "Не удалось сохранить данные, попробуйте ещё раз"):
        super().__init__(message)
        self.message = message
