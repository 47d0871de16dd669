from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """Powertools Logger を取得する

    service_name 省略時は POWERTOOLS_SERVICE_NAME が使われる。
    """
    return Logger(service=service_name)
