from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions


class ReservationEngineStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        admission_policy: str = "strict",
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        fns = Functions(
            self,
            "Functions",
            table=database.table,
            admission_policy=admission_policy,
        )
        api = Api(self, "Api", functions=fns)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
