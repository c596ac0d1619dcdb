from dataclasses import asdict, dataclass


@dataclass
class MultisendReward:
    recipient: str
    amount: str

    def as_dict(self) -> dict:
        return asdict(self)
