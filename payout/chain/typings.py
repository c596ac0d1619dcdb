from dataclasses import dataclass


@dataclass
class BlockProducer:
    address: str
    production: int

    @staticmethod
    def from_graph(data: dict) -> 'BlockProducer':
        return BlockProducer(
            address=data['address'],
            production=int(data['production']),
        )


@dataclass
class EpochMeta:
    num: int
    height: int
    gravity_chain_start_height: int
    block_producers: list[BlockProducer]

    def get_productivity(self, operator: str) -> int:
        """Number of blocks produced by the operator, zero if it is not a block producer"""
        for block_producer in self.block_producers:
            if block_producer.address == operator:
                return block_producer.production
        return 0

    @staticmethod
    def from_graph(data: dict) -> 'EpochMeta':
        epoch_data = data['epochData']
        return EpochMeta(
            num=int(epoch_data['num']),
            height=int(epoch_data['height']),
            gravity_chain_start_height=int(epoch_data['gravityChainStartHeight']),
            block_producers=[
                BlockProducer.from_graph(item) for item in data['blockProducersInfo'] or []
            ],
        )
