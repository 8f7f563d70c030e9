"""
Simple examples demonstrating the AutoCat engine.
"""

# Example 1: Expense categorisation
print("=" * 60)
print("Example 1: Expense Categorisation")
print("=" * 60)

from autocat_engine import TransactionInput, auto_categorise

transactions = [
    ("POS SCREWFIX IRELAND", -45.0),
    ("MAXOL STATION", -60.0),
    ("SPOTIFY PREMIUM", -12.99),
    ("DOOLEYS HOTEL WATERFORD", -129.0),
    ("To John Smith", -400.0),
]

print("\nCategorising expenses for a carpentry business:")
for desc, amount in transactions:
    result = auto_categorise(TransactionInput(
        amount=amount,
        description=desc,
        direction="expense",
        user_industry="carpentry_joinery",
    ))
    print(
        f"  {desc:30} -> {result.category:25} {result.vat_type:18} "
        f"(conf: {result.confidence_score}, review: {result.needs_review})"
    )

# Example 2: Receipt refinement
print("\n" + "=" * 60)
print("Example 2: Receipt Refinement")
print("=" * 60)

for receipt in (None, "Diesel 40L", "Unleaded petrol 30L"):
    result = auto_categorise(TransactionInput(-60.0, "CIRCLE K", "expense", receipt_text=receipt))
    print(f"  receipt={receipt!r:25} -> {result.category} (VAT deductible: {result.vat_deductible})")

# Example 3: Income classification
print("\n" + "=" * 60)
print("Example 3: Income Classification")
print("=" * 60)

income = [
    ("REVENUE COMMISSIONERS VAT REFUND", "construction"),
    ("FROM CARACON LTD PAYMENT", "construction"),
    ("INVOICE 1042 PAYMENT", "professional_services"),
]

for desc, industry in income:
    result = auto_categorise(TransactionInput(2500.0, desc, "income", user_industry=industry))
    print(f"  {desc:35} -> {result.category:12} {result.vat_type}")

# Example 4: VAT helpers
print("\n" + "=" * 60)
print("Example 4: VAT Helpers")
print("=" * 60)

from autocat_engine import apply_two_thirds_rule, calculate_vat_from_gross, is_vat_deductible

split = calculate_vat_from_gross(123.0, "standard_23")
print(f"\n  €123.00 gross at 23% -> net €{split.net_amount:.2f}, VAT €{split.vat_amount:.2f}")
print(f"  Two-thirds rule (€300 parts / €1000 job) -> {apply_two_thirds_rule(300, 1000).applicable_rate}")
deductible = is_vat_deductible("Nandos restaurant")
print(f"  Nandos restaurant -> deductible: {deductible.is_deductible} ({deductible.section})")

print("\n" + "=" * 60)
print("✓ All examples completed successfully!")
print("=" * 60)
