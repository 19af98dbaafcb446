"""
Client settings document schema and defaults.

Wire keys are camelCase. Leaf types are strict: "true" is not a boolean and
"1" is not a number.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class DeliveryMethodEnum(str, Enum):
    PRINT_NOW = "PRINT_NOW"
    PRINT_AT_HOME = "PRINT_AT_HOME"


class SettingsModel(BaseModel):
    # Input is accepted under the camelCase wire keys only.
    model_config = ConfigDict(alias_generator=to_camel)


# NaN and the infinities parse from JSON but cannot be stored or returned.
FiniteStrictFloat = Annotated[float, Strict(), AllowInfNan(False)]


class DeliveryMethod(SettingsModel):
    name: StrictStr
    # Carried as "enum" on the wire.
    method: DeliveryMethodEnum = Field(alias="enum")
    order: Union[StrictInt, FiniteStrictFloat]
    is_default: StrictBool
    selected: StrictBool


class FulfillmentFormat(SettingsModel):
    rfid: StrictBool
    print: StrictBool


class Printer(SettingsModel):
    id: Optional[StrictStr]


class PrintingFormat(SettingsModel):
    format_a: StrictBool
    format_b: StrictBool


class Scanning(SettingsModel):
    scan_manually: StrictBool
    scan_when_complete: StrictBool


class PaymentMethods(SettingsModel):
    cash: StrictBool
    credit_card: StrictBool
    comp: StrictBool


class TicketDisplay(SettingsModel):
    left_in_allotment: StrictBool
    sold_out: StrictBool


class CustomerInfo(SettingsModel):
    active: StrictBool
    basic_info: StrictBool
    address_info: StrictBool


class ClientSettingsBody(SettingsModel):
    """
    The writable part of a settings document (everything except `clientId`).
    """

    delivery_methods: list[DeliveryMethod]
    fulfillment_format: FulfillmentFormat
    printer: Printer
    printing_format: PrintingFormat
    scanning: Scanning
    payment_methods: PaymentMethods
    ticket_display: TicketDisplay
    customer_info: CustomerInfo


class ClientSettings(ClientSettingsBody):
    client_id: int

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def default_client_settings(client_id: int) -> ClientSettings:
    return ClientSettings.model_validate(
        {
            "clientId": client_id,
            "deliveryMethods": [
                {
                    "name": "Print Now",
                    "enum": DeliveryMethodEnum.PRINT_NOW.value,
                    "order": 1,
                    "isDefault": True,
                    "selected": True,
                },
                {
                    "name": "Print@Home",
                    "enum": DeliveryMethodEnum.PRINT_AT_HOME.value,
                    "order": 2,
                    "isDefault": False,
                    "selected": True,
                },
            ],
            "fulfillmentFormat": {"rfid": False, "print": False},
            "printer": {"id": None},
            "printingFormat": {"formatA": True, "formatB": False},
            "scanning": {"scanManually": True, "scanWhenComplete": False},
            "paymentMethods": {"cash": True, "creditCard": False, "comp": False},
            "ticketDisplay": {"leftInAllotment": True, "soldOut": True},
            "customerInfo": {"active": False, "basicInfo": False, "addressInfo": False},
        }
    )
