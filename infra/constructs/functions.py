from aws_cdk import BundlingOptions, Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "booking-service"
RUNTIME = _lambda.Runtime.PYTHON_3_13


class Functions(Construct):
    """予約ライフサイクルの Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        admission_policy: str = "strict",
    ) -> None:
        super().__init__(scope, id)

        code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=RUNTIME.bundling_image,
                command=[
                    "bash",
                    "-c",
                    "pip install -r requirements.txt -t /asset-output"
                    " && cp -au . /asset-output",
                ],
            ),
        )
        environment = {
            "TABLE_NAME": table.table_name,
            "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
            "POWERTOOLS_LOG_LEVEL": "INFO",
            "ADMISSION_POLICY": admission_policy,
            "STORE_CONNECT_TIMEOUT": "2",
            "STORE_READ_TIMEOUT": "5",
        }

        self.create_booking = self._create_function(
            "CreateBookingLambda", "create", code, environment
        )
        self.update_booking = self._create_function(
            "UpdateBookingLambda", "update", code, environment
        )
        self.delete_booking = self._create_function(
            "DeleteBookingLambda", "delete", code, environment
        )
        self.delete_all_bookings = self._create_function(
            "DeleteAllBookingsLambda", "delete_all", code, environment
        )
        for fn in [
            self.create_booking,
            self.update_booking,
            self.delete_booking,
            self.delete_all_bookings,
        ]:
            table.grant_read_write_data(fn)

        self.get_booking = self._create_function(
            "GetBookingLambda", "get", code, environment
        )
        self.list_bookings = self._create_function(
            "ListBookingsLambda", "list_by_user", code, environment
        )
        table.grant_read_data(self.get_booking)
        table.grant_read_data(self.list_bookings)

        self.all_functions = [
            self.create_booking,
            self.update_booking,
            self.get_booking,
            self.list_bookings,
            self.delete_booking,
            self.delete_all_bookings,
        ]

    def _create_function(
        self,
        id: str,
        module: str,
        code: _lambda.Code,
        environment: dict[str, str],
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=RUNTIME,
            handler=f"services.booking.handlers.{module}.lambda_handler",
            code=code,
            timeout=Duration.seconds(15),
            environment=environment,
        )
