from aspects import BaseEntity, invariant
from aspects.exceptions import ValidationError
from aspects.fields import Auto, Integer, String


class Account(BaseEntity):
    account_number = String(max_length=50, required=True)
    balance = Integer(default=0)

    @invariant.pre
    def closed_accounts_cannot_change(self):
        if self.account_number.startswith("CLOSED"):
            raise ValidationError({"_entity": ["Closed accounts cannot change"]})

    @invariant.post
    def balance_cannot_be_negative(self):
        if self.balance < 0:
            raise ValidationError({"balance": ["cannot be negative"]})


class AbstractMember(BaseEntity):
    name = String(max_length=50)

    class Meta:
        abstract = True


class ConcreteMember(AbstractMember):
    pass


class Member(BaseEntity):
    ssn = Auto(identifier=True)
    name = String(max_length=50, required=True)


class Guest(BaseEntity):
    name = String(max_length=50)

    class Meta:
        auto_add_id_field = False


class Badge(BaseEntity):
    label = String(max_length=20, required=True)

    class Meta:
        frozen = True
        schema_name = "badges"


class LoyaltyAccount(Account):
    points = Integer(min_value=0, default=0)
