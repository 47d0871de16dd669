from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    呼び出し元の user_id はパスで受け取る（認証・認可は前段で行う）。
    """

    def __init__(self, scope: Construct, id: str, functions: Functions) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "ReservationRestApi",
            rest_api_name="Room Reservation API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=50,
                throttling_rate_limit=25,
            ),
        )

        # /users/{user_id}/bookings
        user_bookings = (
            self.rest_api.root.add_resource("users")
            .add_resource("{user_id}")
            .add_resource("bookings")
        )
        user_bookings.add_method(
            "POST", apigw.LambdaIntegration(functions.create_booking)
        )
        user_bookings.add_method(
            "GET", apigw.LambdaIntegration(functions.list_bookings)
        )
        user_bookings.add_method(
            "DELETE", apigw.LambdaIntegration(functions.delete_all_bookings)
        )

        # /bookings/{booking_id}
        booking = self.rest_api.root.add_resource("bookings").add_resource(
            "{booking_id}"
        )
        booking.add_method("GET", apigw.LambdaIntegration(functions.get_booking))
        booking.add_method("PUT", apigw.LambdaIntegration(functions.update_booking))
        booking.add_method(
            "DELETE", apigw.LambdaIntegration(functions.delete_booking)
        )
