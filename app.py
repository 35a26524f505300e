#!/usr/bin/env python3

import aws_cdk as cdk

from reservation_stack import ReservationStack

app = cdk.App()
ReservationStack(
    app,
    "HotelReservationStack",
)

app.synth()
