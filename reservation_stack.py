from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Database


class ReservationStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        # アプリケーション側の TABLE_NAME に設定する値
        CfnOutput(self, "ReservationTableName", value=database.table.table_name)
