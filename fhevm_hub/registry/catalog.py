"""Compiled-in registries of FHEVM examples, categories and documentation topics."""

from __future__ import annotations

from .models import (
    CategoryConfig,
    ConceptSection,
    Difficulty,
    DocTopicConfig,
    ExampleConfig,
    FunctionDoc,
)
from .registry import Registry


# ---------------------------------------------------------------------------
# Examples
# ---------------------------------------------------------------------------

EXAMPLES: dict[str, ExampleConfig] = {
    "fhe-counter": ExampleConfig(
        name="fhe-counter",
        title="FHE Counter",
        description="Simple encrypted counter demonstrating basic FHE operations",
        concepts=("Encrypted state", "FHE.add", "FHE.sub", "Permission management"),
        difficulty=Difficulty.BEGINNER,
    ),
    "encrypt-single-value": ExampleConfig(
        name="encrypt-single-value",
        title="Encrypt Single Value",
        description="Demonstrates FHE encryption mechanism and common pitfalls",
        concepts=("Input proofs", "Encryption", "Permission system", "Common mistakes"),
        difficulty=Difficulty.BEGINNER,
    ),
    "encrypt-multiple-values": ExampleConfig(
        name="encrypt-multiple-values",
        title="Encrypt Multiple Values",
        description="Shows how to encrypt and handle multiple values in a single transaction",
        concepts=("Batch encryption", "Multiple values", "Permission management"),
        difficulty=Difficulty.BEGINNER,
    ),
    "user-decrypt-single-value": ExampleConfig(
        name="user-decrypt-single-value",
        title="User Decrypt Single Value",
        description="Demonstrates user decryption and permission requirements",
        concepts=("User decryption", "View functions", "Access control", "Permissions"),
        difficulty=Difficulty.BEGINNER,
    ),
    "user-decrypt-multiple-values": ExampleConfig(
        name="user-decrypt-multiple-values",
        title="User Decrypt Multiple Values",
        description="Shows how to decrypt multiple encrypted values for a user",
        concepts=("Batch decryption", "Multiple values", "Access control", "Selective access"),
        difficulty=Difficulty.INTERMEDIATE,
    ),
    "fhe-arithmetic": ExampleConfig(
        name="fhe-arithmetic",
        title="FHE Arithmetic Operations",
        description="Demonstrates arithmetic operations on encrypted values",
        concepts=("FHE.add", "FHE.sub", "FHE.mul", "Chaining operations"),
        difficulty=Difficulty.INTERMEDIATE,
    ),
    "access-control": ExampleConfig(
        name="access-control",
        title="Access Control with FHE",
        description="Demonstrates access control patterns with encrypted values",
        concepts=("FHE.allow", "FHE.allowThis", "FHE.allowTransient", "Role-based access"),
        difficulty=Difficulty.INTERMEDIATE,
    ),
    "real-privacy-trading": ExampleConfig(
        name="real-privacy-trading",
        title="Real Privacy Trading",
        description="Privacy-preserving decentralized trading platform demonstrating FHEVM concepts",
        concepts=(
            "Encrypted state variables",
            "Private computation",
            "Access control patterns",
            "Confidential transactions",
        ),
        difficulty=Difficulty.ADVANCED,
    ),
}


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

CATEGORIES: dict[str, CategoryConfig] = {
    "basic": CategoryConfig(
        name="basic",
        title="Basic FHEVM Operations",
        description="Foundational examples covering core FHEVM concepts and operations",
        examples=(
            "fhe-counter",
            "encrypt-single-value",
            "encrypt-multiple-values",
            "user-decrypt-single-value",
            "user-decrypt-multiple-values",
        ),
        concepts=(
            "Encrypted variables",
            "FHE operations",
            "Input proofs",
            "User decryption",
            "Permission system",
            "Batch operations",
        ),
        difficulty=Difficulty.BEGINNER,
    ),
    "operations": CategoryConfig(
        name="operations",
        title="FHE Operations and Arithmetic",
        description="Examples demonstrating FHE arithmetic operations and comparisons",
        examples=("fhe-arithmetic",),
        concepts=(
            "FHE.add",
            "FHE.sub",
            "FHE.mul",
            "FHE.eq",
            "Chaining operations",
            "Result permissions",
        ),
        difficulty=Difficulty.INTERMEDIATE,
    ),
    "access": CategoryConfig(
        name="access",
        title="Access Control Patterns",
        description="Examples demonstrating access control and permission management",
        examples=("access-control",),
        concepts=(
            "FHE.allow",
            "FHE.allowThis",
            "FHE.allowTransient",
            "Role-based access",
            "Ownership patterns",
            "Authorization checks",
        ),
        difficulty=Difficulty.INTERMEDIATE,
    ),
    "trading": CategoryConfig(
        name="trading",
        title="Privacy-Preserving Trading Examples",
        description=(
            "Advanced examples demonstrating privacy-preserving decentralized "
            "trading using FHEVM"
        ),
        examples=("real-privacy-trading",),
        concepts=(
            "Encrypted state variables",
            "Private computation",
            "Access control patterns",
            "Confidential transactions",
            "Order matching",
            "Portfolio management",
        ),
        difficulty=Difficulty.ADVANCED,
    ),
}


# ---------------------------------------------------------------------------
# Documentation topics
# ---------------------------------------------------------------------------

DOC_TOPICS: dict[str, DocTopicConfig] = {
    "fhe-counter": DocTopicConfig(
        name="fhe-counter",
        title="FHE Counter",
        description="Encrypted counter incremented and decremented without revealing its value",
        contract_file="contracts/FHECounter.sol",
        test_file="test/FHECounter.ts",
        chapter="basic",
        concept_sections=(
            ConceptSection(
                heading="Encrypted State Variables",
                points=(
                    "The counter is stored as an euint32",
                    "The plaintext value never appears on chain",
                ),
            ),
            ConceptSection(
                heading="Encrypted Inputs",
                points=(
                    "Increments arrive as externalEuint32 handles",
                    "Each input is verified against its input proof",
                ),
            ),
            ConceptSection(
                heading="Access Control Patterns",
                points=(
                    "Contract-level permissions with FHE.allowThis()",
                    "Caller permissions with FHE.allow()",
                ),
            ),
        ),
        key_functions=(
            FunctionDoc(
                name="increment",
                summary="Adds an encrypted amount to the counter.",
                signature="function increment(externalEuint32 inputEuint32, bytes calldata inputProof) external",
            ),
            FunctionDoc(
                name="decrement",
                summary="Subtracts an encrypted amount from the counter.",
                signature="function decrement(externalEuint32 inputEuint32, bytes calldata inputProof) external",
            ),
            FunctionDoc(
                name="getCount",
                summary="Returns the encrypted counter handle.",
                signature="function getCount() external view returns (euint32)",
            ),
        ),
        topics=(
            "Encrypted state variables",
            "Encrypted inputs and proofs",
            "FHE.add and FHE.sub",
            "Permission management",
        ),
    ),
    "real-privacy-trading": DocTopicConfig(
        name="real-privacy-trading",
        title="Real Privacy Trading Platform",
        description="Privacy-preserving decentralized trading using FHEVM",
        contract_file="contracts/RealPrivacyTrading.sol",
        test_file="test/RealPrivacyTrading.ts",
        chapter="privacy-trading",
        concept_sections=(
            ConceptSection(
                heading="Encrypted State Variables",
                points=(
                    "Trading volumes stored as encrypted values",
                    "Portfolio balances maintained in encrypted form",
                    "Price data encrypted for strategy confidentiality",
                ),
            ),
            ConceptSection(
                heading="Private Computation",
                points=(
                    "Order matching executed on encrypted data",
                    "Portfolio calculations without decryption",
                    "Confidential balance updates",
                ),
            ),
            ConceptSection(
                heading="Access Control Patterns",
                points=(
                    "Contract-level permissions with FHE.allowThis()",
                    "User-level permissions with FHE.allow()",
                    "Privacy-preserving portfolio queries",
                ),
            ),
            ConceptSection(
                heading="Confidential Transactions",
                points=(
                    "Buy/sell orders with encrypted amounts",
                    "Anonymous market participation",
                    "Zero-knowledge execution proofs",
                ),
            ),
        ),
        key_functions=(
            FunctionDoc(
                name="placeOrder",
                summary="Places a limit order with encrypted amount and price.",
                signature=(
                    "function placeOrder(\n"
                    "    string memory pair,\n"
                    "    bool isLong,\n"
                    "    uint32 amount,\n"
                    "    uint32 price\n"
                    ") external returns (uint256)"
                ),
            ),
            FunctionDoc(
                name="quickBuy",
                summary="Executes an instant market buy order.",
                signature="function quickBuy(string memory pair, uint32 amount) external returns (uint256)",
            ),
            FunctionDoc(
                name="quickSell",
                summary="Executes an instant market sell order.",
                signature="function quickSell(string memory pair, uint32 amount) external returns (uint256)",
            ),
            FunctionDoc(
                name="getPortfolioBalance",
                summary="Retrieves encrypted portfolio balance.",
                signature=(
                    "function getPortfolioBalance(address trader, string memory pair) "
                    "external view returns (uint256)"
                ),
            ),
        ),
        topics=(
            "Encrypted state variables",
            "Private computation",
            "Access control patterns",
            "Confidential transactions",
        ),
        use_cases=(
            ConceptSection(
                heading="Individual Traders",
                points=(
                    "Private trading with hidden strategies",
                    "Front-running prevention",
                    "Anonymous market participation",
                ),
            ),
            ConceptSection(
                heading="Institutional Users",
                points=(
                    "Regulatory compliance",
                    "Competitive advantage protection",
                    "Institutional-grade privacy",
                ),
            ),
            ConceptSection(
                heading="Privacy Advocates",
                points=(
                    "Financial privacy",
                    "Data sovereignty",
                    "Decentralized privacy",
                ),
            ),
        ),
    ),
}


EXAMPLE_REGISTRY: Registry[ExampleConfig] = Registry("example", EXAMPLES)
CATEGORY_REGISTRY: Registry[CategoryConfig] = Registry("category", CATEGORIES)
DOC_REGISTRY: Registry[DocTopicConfig] = Registry("documentation topic", DOC_TOPICS)
