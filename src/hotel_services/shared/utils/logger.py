from aws_lambda_powertools import Logger


def get_logger(service_name: str) -> Logger:
    """サービス名付きの構造化ロガーを返す"""
    return Logger(service=service_name)
