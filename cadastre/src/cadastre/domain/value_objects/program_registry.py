"""
ProgramRegistry value object - on-chain program constants.

The constants are versioned with the programs they address. Changing any
of them is a breaking change: every existing address must be re-derived.
"""

from dataclasses import dataclass
from typing import Any

from cadastre.domain.value_objects.address import Address

XYBER_PROGRAM_ID = "8FydojysL5DJ8M3s15JLFEbsKzyQ1BcFgSMVDvJetEEq"
TOKEN_FACTORY_PROGRAM_ID = "851Ez1PDMZY4yGYahRba87g7CYtmCfD8v5TP85cGj95p"
METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
PAYMENT_MINT = "6WQQPDXsBxkgMwuApkXbV2bUf3CZAJmGBDqk62aMpmKR"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
ASSOCIATED_TOKEN_PROGRAM_ID = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"


@dataclass(frozen=True)
class ProgramRegistry:
    """
    Named program identifiers used by the address graph.

    Attributes:
        application_program: Xyber bonding-curve program (core/token PDAs)
        token_factory_program: Program owning the mint PDA
        metadata_program: Metaplex token metadata program
        payment_mint: Mint of the token buyers pay with
        token_program: SPL Token program (associated account seed)
        associated_token_program: SPL Associated Token Account program
    """

    application_program: Address
    token_factory_program: Address
    metadata_program: Address
    payment_mint: Address
    token_program: Address
    associated_token_program: Address

    @classmethod
    def default(cls) -> "ProgramRegistry":
        """Registry with the deployed program constants."""
        return cls(
            application_program=Address.from_string(XYBER_PROGRAM_ID),
            token_factory_program=Address.from_string(TOKEN_FACTORY_PROGRAM_ID),
            metadata_program=Address.from_string(METADATA_PROGRAM_ID),
            payment_mint=Address.from_string(PAYMENT_MINT),
            token_program=Address.from_string(TOKEN_PROGRAM_ID),
            associated_token_program=Address.from_string(
                ASSOCIATED_TOKEN_PROGRAM_ID
            ),
        )

    @classmethod
    def from_settings(cls, settings: Any) -> "ProgramRegistry":
        """
        Build registry from application settings.

        Args:
            settings: Object exposing the *_PROGRAM_ID / PAYMENT_MINT fields

        Raises:
            InvalidAddressError: If a configured id is malformed
        """
        return cls(
            application_program=Address.from_string(
                settings.XYBER_PROGRAM_ID, field="XYBER_PROGRAM_ID"
            ),
            token_factory_program=Address.from_string(
                settings.TOKEN_FACTORY_PROGRAM_ID, field="TOKEN_FACTORY_PROGRAM_ID"
            ),
            metadata_program=Address.from_string(
                settings.METADATA_PROGRAM_ID, field="METADATA_PROGRAM_ID"
            ),
            payment_mint=Address.from_string(
                settings.PAYMENT_MINT, field="PAYMENT_MINT"
            ),
            token_program=Address.from_string(
                settings.TOKEN_PROGRAM_ID, field="TOKEN_PROGRAM_ID"
            ),
            associated_token_program=Address.from_string(
                settings.ASSOCIATED_TOKEN_PROGRAM_ID,
                field="ASSOCIATED_TOKEN_PROGRAM_ID",
            ),
        )
