from typing import List, Literal, Union

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr

Provider = Literal[
    "gocardless",
    "quiltt",
    "finverse",
    "pluggy",
    "lunchmoney",
    "simplefin",
    "stripe",
    "akahu",
]

AccountStatus = Literal["ACTIVE", "DISCONNECTED", "ERROR"]

# int stays int so rendered amounts match what the API sent
Number = Union[StrictInt, StrictFloat]


# Account Schemas
class Account(BaseModel):
    id: StrictInt
    name: StrictStr
    institution_name: StrictStr
    institution_logo: StrictStr
    provider: Provider
    # Optional fields may be absent upstream but never null
    currency: StrictStr = None
    status: AccountStatus = None


class AccountsResponse(BaseModel):
    accounts: List[Account]


# Transaction Schemas
class Transaction(BaseModel):
    id: StrictStr
    account_id: StrictInt
    date: StrictStr
    amount: Number
    currency: StrictStr
    description: StrictStr
    merchant_name: StrictStr = None
    category: StrictStr = None
    pending: StrictBool = None


class TransactionsResponse(BaseModel):
    transactions: List[Transaction]


# Balance Schemas
class Balance(BaseModel):
    available: Number
    current: Number
    currency: StrictStr


class BalanceResponse(BaseModel):
    balance: Balance
