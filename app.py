#!/usr/bin/env python3

import aws_cdk as cdk

from reservation_engine_stack import ReservationEngineStack

app = cdk.App()
ReservationEngineStack(
    app,
    "ReservationEngineStack",
    admission_policy=app.node.try_get_context("admission_policy") or "strict",
)

app.synth()
