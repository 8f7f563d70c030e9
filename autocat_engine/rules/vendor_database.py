"""
Vendor rule table for Irish bank-transaction auto-categorisation.

Each VendorEntry maps a set of lowercase description patterns to an
accounting category, an Irish VAT type and the flags the orchestrator
uses (trade/tech supplier, receipt required, Form 11 relief).

Table order matters: the exact-match phase returns the first entry whose
pattern appears in the description, so specific vendors are listed before
generic ones.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple


RELIEF_TYPES = ("medical", "pension", "health_insurance", "rent", "charitable", "tuition")


class RuleTableError(ValueError):
    """Raised when a static rule table fails its integrity checks at load time."""

    def __init__(self, table: str, errors: List[str]):
        self.table = table
        self.errors = errors
        super().__init__(f"{table} failed validation ({len(errors)} errors): " + "; ".join(errors))


@dataclass(frozen=True)
class AmountAdjustment:
    """
    Amount-conditioned override attached to a vendor.

    When the absolute transaction amount is at or above ``threshold``
    (or strictly below it, for ``comparison="below"``) the non-None fields
    are reported as adjustments alongside the base vendor match.
    """
    threshold: float
    comparison: str = "above"  # 'above' or 'below'
    category: Optional[str] = None
    confidence: Optional[int] = None
    purpose: Optional[str] = None
    vat_deductible: Optional[bool] = None

    def applies_to(self, amount: float) -> bool:
        value = abs(amount or 0.0)
        if self.comparison == "below":
            return value < self.threshold
        return value >= self.threshold


@dataclass(frozen=True)
class VendorEntry:
    """One row of the vendor rule table."""
    name: str
    patterns: List[str]
    category: str
    vat_type: str
    vat_deductible: bool
    purpose: str
    needs_receipt: bool = False
    is_trade_supplier: bool = False
    is_tech_supplier: bool = False
    relief_type: Optional[str] = None
    sector: Optional[str] = None
    mcc_codes: Tuple[int, ...] = ()
    amount_adjustments: Tuple[AmountAdjustment, ...] = field(default=())

    def adjustment_for(self, amount: float) -> Optional[AmountAdjustment]:
        """Return the first amount adjustment that applies to ``amount``, if any."""
        for adjustment in self.amount_adjustments:
            if adjustment.applies_to(amount):
                return adjustment
        return None


VENDOR_DATABASE: List[VendorEntry] = [
    # Revenue refunds (not taxable income)
    VendorEntry(
        name="Revenue Commissioners",
        patterns=[
            "revenue", "revenue commissioners", "rev comm", "revenue comm", "collector general",
            "collector-general", "rev.ie", "ros refund", "revenue refund", "tax refund",
            "vat refund", "paye refund", "ct refund", "rct refund",
        ],
        category="Tax Refund",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Tax refund from Revenue Commissioners. Not taxable income - this is a return of previously overpaid tax.",
        sector="government",
    ),

    # Movements between the user's own accounts
    VendorEntry(
        name="Internal Transfer",
        patterns=[
            "*mobi online saver", "*mobi current", "mobi online saver", "mobi current",
            "mobi saver", "online saver", "current account", "from current", "to current",
            "savings transfer", "internal transfer",
        ],
        category="Internal Transfer",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Internal transfer between accounts. Not actual income or expense - funds movement only.",
        sector="banking",
    ),

    # Software and SaaS
    VendorEntry(
        name="OpenAI / ChatGPT",
        patterns=["openai", "chatgpt", "gpt", "ai subscr"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Software subscription for business operations. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="SurveyMonkey",
        patterns=["surveymonkey", "survey monkey"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Survey software subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Accounting Software",
        patterns=["xero", "sage", "quickbooks"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Accounting software subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="QR.io",
        patterns=["qr.io", "qr generator"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Digital service subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Apple",
        patterns=["apple.com/bill", "apple.com", "itunes"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Software/app subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Software Subscriptions",
        patterns=[
            "spotify", "adobe", "microsoft", "shopify", "google storage", "dropbox", "canva",
            "zoom", "slack",
        ],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Software subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Atlassian",
        patterns=["atlassian", "jira", "confluence", "bitbucket", "trello"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Project management/collaboration software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="GitHub",
        patterns=["github", "git hub"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Developer tools subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Amazon Web Services",
        patterns=["aws", "amazon web services", "amazonaws"],
        category="Cloud Hosting",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Cloud hosting/services. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Google Cloud / Workspace",
        patterns=["google cloud", "google workspace", "google gsuite", "g suite", "google one"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Cloud services/productivity suite. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Notion",
        patterns=["notion", "notion.so"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Productivity software subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Figma",
        patterns=["figma"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Design software subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Mailchimp",
        patterns=["mailchimp", "mail chimp", "intuit mailchimp"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Email marketing software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="HubSpot",
        patterns=["hubspot"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="CRM/marketing software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Stripe",
        patterns=["stripe"],
        category="Payment Processing",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Payment processing fees. Financial services exempt from VAT.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Twilio",
        patterns=["twilio", "sendgrid"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Communications platform. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Calendly",
        patterns=["calendly"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Scheduling software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Miro",
        patterns=["miro", "miro.com"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Collaboration whiteboard software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Monday.com",
        patterns=["monday.com", "monday com"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Project management software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Asana",
        patterns=["asana"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Project management software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="1Password / LastPass",
        patterns=["1password", "lastpass", "dashlane", "bitwarden"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Password management software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Grammarly",
        patterns=["grammarly"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Writing assistance software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Wix / Squarespace",
        patterns=["wix", "squarespace", "wordpress.com", "godaddy", "namecheap"],
        category="Marketing",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Website builder/hosting. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Anthropic / Claude",
        patterns=["anthropic", "claude.ai"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="AI software subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Vercel / Netlify",
        patterns=["vercel", "netlify"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Web hosting/deployment platform. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Freshbooks / Wave",
        patterns=["freshbooks", "wave accounting", "waveapps"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Accounting/invoicing software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Intercom / Zendesk",
        patterns=["intercom", "zendesk"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Customer support software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="DocuSign",
        patterns=["docusign"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="E-signature software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Loom / Vimeo",
        patterns=["loom", "vimeo"],
        category="Software",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Video platform subscription. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="Hootsuite / Buffer",
        patterns=["hootsuite", "buffer"],
        category="Marketing",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Social media management software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),
    VendorEntry(
        name="SEMrush / Ahrefs",
        patterns=["semrush", "ahrefs"],
        category="Marketing",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="SEO/marketing analytics software. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),

    # Web hosting
    VendorEntry(
        name="Web Hosting",
        patterns=["blacknight", "hosting", "domain"],
        category="Marketing",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Web hosting/internet services for business. VAT deductible under Section 59.",
        is_tech_supplier=True,
        sector="software",
    ),

    # Fuel stations: mixed retailers, receipt decides diesel vs petrol
    VendorEntry(
        name="Maxol",
        patterns=["maxol", "m3 mulhuddart maxol", "m3 maxol"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase (diesel/petrol/food/other).",
        sector="fuel",
    ),
    VendorEntry(
        name="Circle K",
        patterns=["circle k", "circlek"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Applegreen",
        patterns=["applegreen"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Texaco",
        patterns=["texaco"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Top Oil",
        patterns=["top oil", "topoil"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Inver / DCC Energy",
        patterns=["inver", "dcc energy"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel/energy supplier. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Shell",
        patterns=[
            "shell fuel", "shell garage", "shell service", "shell station", "shell petrol",
            "shell diesel",
        ],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Esso",
        patterns=["esso"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station - multi-vendor store. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Go Fuel",
        patterns=["go fuel", "go petrol"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel station. Need receipt to determine purchase.",
        sector="fuel",
    ),
    VendorEntry(
        name="Certa",
        patterns=["certa"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Fuel/heating oil supplier. Need receipt to determine purchase.",
        sector="fuel",
    ),

    # Convenience stores
    VendorEntry(
        name="Spar",
        patterns=["spar", "spar hollystown"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Convenience store - likely personal. Treated as drawings unless receipt proves business supplies.",
        sector="retail",
    ),
    VendorEntry(
        name="Centra / Daybreak",
        patterns=["centra", "daybreak"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Convenience store - likely personal food/drink. Treated as drawings.",
        sector="retail",
    ),
    VendorEntry(
        name="Mr Price",
        patterns=["mr price"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Discount retailer - likely personal. Treated as drawings unless receipt proves business use.",
        sector="retail",
    ),
    VendorEntry(
        name="EuroGiant / Dealz",
        patterns=["eurogiant", "euro giant", "dealz", "poundland"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Discount retailer - likely personal. Treated as drawings unless receipt proves business supplies.",
        sector="retail",
    ),
    VendorEntry(
        name="Londis / Mace",
        patterns=["londis", "mace"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Convenience store - likely personal. Treated as drawings.",
        sector="retail",
    ),
    VendorEntry(
        name="Costcutter",
        patterns=["costcutter"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Convenience store - likely personal. Treated as drawings.",
        sector="retail",
    ),

    # Food and drink
    VendorEntry(
        name="Fast Food",
        patterns=["mcdonalds", "mcdonald", "burger king", "kfc", "subway", "supermacs"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Food/drink expense. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="food",
    ),
    VendorEntry(
        name="Pubs & Bars",
        patterns=[
            "kennedys", "murrays bar", "madigans", "the pub", "bar & grill", "bar restaurant",
            "public house",
        ],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Food/drink/entertainment. VAT NOT deductible under Section 60(2)(a)(i) and (iii).",
        sector="food",
    ),
    VendorEntry(
        name="Coffee / Cafe",
        patterns=["butlers chocolate", "cafe", "coffee", "starbucks", "costa"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Food/drink expense. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="food",
    ),
    VendorEntry(
        name="Food Delivery",
        patterns=["just eat", "deliveroo", "uber eats"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Food delivery. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="food",
    ),
    VendorEntry(
        name="Hotels / Accommodation",
        patterns=["hotel", "accommodation", "b&b", "airbnb"],
        category="Subsistence",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Accommodation for staff. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="accommodation",
    ),
    VendorEntry(
        name="Nandos",
        patterns=["nandos", "nando's"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Restaurant/food expense. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="food",
    ),
    VendorEntry(
        name="Dominos / Pizza",
        patterns=["dominos", "domino's", "pizza hut", "apache pizza", "four star pizza"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Food delivery/restaurant. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="food",
    ),
    VendorEntry(
        name="Insomnia Coffee",
        patterns=["insomnia coffee", "insomnia"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Coffee shop. VAT NOT deductible under Section 60(2)(a)(i).",
        sector="food",
    ),

    # Personal spending
    VendorEntry(
        name="Smyths Toys",
        patterns=["smyths", "smyth toy"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Toy retailer. Personal expense - treated as drawings.",
        sector="retail",
    ),
    VendorEntry(
        name="Entertainment Subscriptions",
        patterns=["playstation", "xbox", "netflix", "amazon prime", "disney"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Entertainment subscription. Personal expense - treated as drawings.",
        sector="entertainment",
    ),
    VendorEntry(
        name="Supermarkets",
        patterns=["lidl", "tesco", "aldi", "dunnes", "supervalu"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Supermarket. Likely personal/food - treated as drawings unless receipt proves business supplies.",
        sector="retail",
    ),
    VendorEntry(
        name="Fashion Retailers",
        patterns=["penneys", "primark", "tk maxx", "zara", "h&m"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Clothing retailer. Personal expense - treated as drawings unless proven workwear.",
        sector="retail",
    ),
    VendorEntry(
        name="Vape",
        patterns=["vapevend", "vapeend", "vape"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Personal expense - treated as drawings.",
        sector="personal",
    ),
    VendorEntry(
        name="Planet Leisure",
        patterns=["planet leisure", "nya*planet"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Entertainment/leisure. Personal expense - treated as drawings.",
        sector="entertainment",
    ),
    VendorEntry(
        name="Uisce Beatha",
        patterns=["uisce beatha"],
        category="Meals & Entertainment",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Pub/bar. Food and drink expense. VAT NOT deductible (Section 60(2)(a)(i)).",
        sector="food",
    ),
    VendorEntry(
        name="Cinema",
        patterns=["cineworld", "vue cinema", "omniplex", "movies@", "imc cinema", "odeon"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Cinema. Personal entertainment - treated as drawings.",
        sector="entertainment",
    ),
    VendorEntry(
        name="Gym / Fitness",
        patterns=[
            "flyefit", "ben dunne gym", "gym plus", "westwood gym", "platinum gym",
            "anytime fitness",
        ],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Gym membership. Personal expense - treated as drawings.",
        sector="personal",
    ),
    VendorEntry(
        name="Arnotts / Brown Thomas",
        patterns=["arnotts", "brown thomas", "bt2"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Department store. Personal expense - treated as drawings unless proven business purchase.",
        sector="retail",
    ),
    VendorEntry(
        name="Sports Retailers",
        patterns=["elverys", "intersport", "life style sports", "jd sports", "sports direct"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        purpose="Sports retailer. Personal expense - treated as drawings.",
        sector="retail",
    ),
    VendorEntry(
        name="EZ Living / Furniture",
        patterns=["ez living", "ikea", "harvey norman furniture", "dem", "meadows & byrne"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Furniture retailer. Likely personal - treated as drawings unless receipt proves office furniture.",
        sector="retail",
    ),

    # Amazon is left out on purpose: marketplace, AWS and refunds cannot be
    # told apart from the description, so the keyword fallback handles it.

    # Taxis
    VendorEntry(
        name="Taxi Services",
        patterns=["freenow", "free now", "bolt", "uber", "mytaxi"],
        category="Motor/travel",
        vat_type="Reduced 13.5%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Taxi/transport service. VAT deductible at 13.5% if for business travel (need receipt).",
        sector="transport",
    ),

    # Accommodation
    VendorEntry(
        name="Booking.com / Hotels",
        patterns=["booking.com", "hotel at booking", "dooleys hotel", "dooleys"],
        category="Subsistence",
        vat_type="Reduced 13.5%",
        vat_deductible=False,
        purpose="Hotel/accommodation. VAT NOT deductible under Section 60(2)(a)(i) unless qualifying conference.",
        sector="accommodation",
    ),

    # Ferries
    VendorEntry(
        name="Port / Ferry",
        patterns=["port of waterford", "irish ferries", "stena line"],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Port/ferry charges for business travel. Zero-rated transport.",
        sector="transport",
    ),

    # Homeware shops
    VendorEntry(
        name="Waterford",
        patterns=["waterfrd", "waterford"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Retail purchase - treated as drawings unless receipt proves business use.",
        sector="retail",
    ),
    VendorEntry(
        name="The Range",
        patterns=["the range"],
        category="Drawings",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Retail store - treated as drawings unless receipt proves business supplies.",
        sector="retail",
    ),

    # Bank fees (exempt)
    VendorEntry(
        name="Revolut Fees",
        patterns=["revolut business fee", "revolut fee", "basic plan fee"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Financial services are VAT exempt. No VAT to claim.",
        sector="banking",
    ),
    VendorEntry(
        name="Bank Charges",
        patterns=[
            "stamp duty", "fee-qtr", "service charge", "account fee", "monthly fee",
            "bank charge",
        ],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Bank fees/charges. Financial services are VAT exempt.",
        sector="banking",
    ),
    VendorEntry(
        name="AIB Fees",
        patterns=["aib fee", "aib charge", "allied irish"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Bank fees. Financial services are VAT exempt.",
        sector="banking",
    ),
    VendorEntry(
        name="BOI Fees",
        patterns=["boi fee", "bank of ireland fee", "bank of ireland charge"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Bank fees. Financial services are VAT exempt.",
        sector="banking",
    ),
    VendorEntry(
        name="PTSB Fees",
        patterns=["ptsb fee", "permanent tsb fee", "permanent tsb charge"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Bank fees. Financial services are VAT exempt.",
        sector="banking",
    ),
    VendorEntry(
        name="N26 Fees",
        patterns=["n26 fee", "n26 charge"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Bank fees. Financial services are VAT exempt.",
        sector="banking",
    ),

    # Tolls
    VendorEntry(
        name="Tolls",
        patterns=[
            "eflow", "e-flow", "e flow", "e-toll", "etoll", "barrier free tol", "toll", "m50",
            "barrier free",
        ],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Toll charges for business travel. Zero-rated/exempt - no VAT to claim but expense is deductible.",
        sector="transport",
    ),

    # Parking
    VendorEntry(
        name="Parking",
        patterns=["parkingpay", "parking", "car park", "ncp"],
        category="Motor/travel",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Parking for business travel. VAT deductible under Section 59.",
        sector="transport",
    ),

    # Builders merchants and tool brands
    VendorEntry(
        name="Screwfix",
        patterns=["screwfix", "screwfix ireland"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Trade supplies/tools for business. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Chadwicks",
        patterns=["chadwicks", "chadwick"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Building materials supplier. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Woodies",
        patterns=["woodies", "woodie"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="DIY/hardware supplies. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="McQuillan / Trade Suppliers",
        patterns=["mcquillan", "jj mcquillan", "powertoolhub", "howdens", "noyeks", "ptrs"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Trade supplies/materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Paint / Timber Suppliers",
        patterns=["pat mcdonnell paint", "strahan", "hardwood", "timber"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Construction materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Brooks / Builders Merchants",
        patterns=["brooks", "brooks timber", "murdock builders", "heiton buckley", "toolstation"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Trade supplies/materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Harvey Norman",
        patterns=["harvey norman"],
        category="Equipment",
        vat_type="Standard 23%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Electronics/equipment. VAT deductible if for business use (need receipt).",
        sector="retail",
    ),
    VendorEntry(
        name="Grafton Group",
        patterns=["grafton", "grafton merchanting", "grafton group"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Building materials supplier (Grafton Group). VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Heatmerchants",
        patterns=["heatmerchants", "heat merchants", "heatmerch"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Plumbing/heating supplies. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Tile Merchant",
        patterns=["tile merchant", "tilemerchant", "national tile"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Tiling materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="JS McCarthy",
        patterns=["js mccarthy", "j s mccarthy", "mccarthy builders"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Builders merchants. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Davies",
        patterns=["davies diy", "davies builders"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="DIY/trade supplies. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Murdock's",
        patterns=["murdock", "murdocks"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Builders merchants. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="McMahon Builders",
        patterns=["mcmahon builders", "mcmahon buildprov", "mcmahon's"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Builders providers. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Topline",
        patterns=["topline"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Hardware/building materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Dulux / Crown Paints",
        patterns=["dulux", "crown paint", "fleetwood paint"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Paint supplier. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Wavin / Polypipe",
        patterns=["wavin", "polypipe"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Piping/drainage materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Keystone Lintels",
        patterns=["keystone", "keystone lintel"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Construction materials (lintels). VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Quinn Building Products",
        patterns=["quinn building", "quinn cement", "quinn products"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Building products/cement. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Irish Cement / CRH",
        patterns=["irish cement", "crh", "roadstone"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Cement/aggregates supplier. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Kingspan",
        patterns=["kingspan"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Insulation/building materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Xtratherm",
        patterns=["xtratherm"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Insulation materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Saint-Gobain / Gyproc",
        patterns=["saint-gobain", "gyproc", "isover", "weber"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Building materials (plasterboard/insulation). VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Bostik / Henkel",
        patterns=["bostik", "henkel"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Adhesives/sealants. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Hilti",
        patterns=["hilti"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Professional power tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Makita",
        patterns=["makita"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Power tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="DeWalt",
        patterns=["dewalt", "de walt"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Power tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Milwaukee Tools",
        patterns=["milwaukee tool", "milwaukee"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Power tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Bosch Professional",
        patterns=["bosch"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Power tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Stanley / Black & Decker",
        patterns=["stanley", "black & decker", "black and decker"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Ridgid",
        patterns=["ridgid"],
        category="Tools",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Professional tools. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="O'Brien's Building Supplies",
        patterns=["o'brien building", "obriens building", "obrien building"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Building materials. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Mac's Warehouse",
        patterns=["mac's warehouse", "macs warehouse"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Building/plumbing supplies. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),
    VendorEntry(
        name="Kelly's Hardware",
        patterns=["kellys hardware", "kelly hardware"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Hardware supplies. VAT deductible under Section 59.",
        is_trade_supplier=True,
        sector="trade",
    ),

    # Motor
    VendorEntry(
        name="Vehicle Parts",
        patterns=["partsforcars", "parts for cars"],
        category="Motor/travel",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle parts for business vehicle. VAT deductible under Section 59.",
        sector="motor",
    ),
    VendorEntry(
        name="Vehicle Repairs / Tyres",
        patterns=["first stop", "fastfit", "kwik fit", "ats euromaster", "halfords"],
        category="Repairs and Maintenance",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle maintenance/parts. VAT deductible under Section 59.",
        sector="motor",
    ),
    VendorEntry(
        name="Vehicle Testing",
        patterns=["nct", "road safety", "cvrt"],
        category="Motor/travel",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle testing. VAT deductible under Section 59.",
        sector="motor",
    ),
    VendorEntry(
        name="Advance Pitstop",
        patterns=["advance pitstop", "advance pit stop"],
        category="Repairs and Maintenance",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle service/tyres. VAT deductible under Section 59.",
        sector="motor",
    ),
    VendorEntry(
        name="Mangan's Auto",
        patterns=["mangans", "mangan auto"],
        category="Repairs and Maintenance",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle repair/service. VAT deductible under Section 59.",
        sector="motor",
    ),

    # Office
    VendorEntry(
        name="Printing Services",
        patterns=["nya*print", "print copy", "printing"],
        category="Office",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Printing/office services. VAT deductible under Section 59.",
        sector="office",
    ),
    VendorEntry(
        name="Viking Direct",
        patterns=["viking direct", "viking office"],
        category="Office",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Office supplies. VAT deductible under Section 59.",
        sector="office",
    ),
    VendorEntry(
        name="Staples",
        patterns=["staples"],
        category="Office",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Office supplies. VAT deductible under Section 59.",
        sector="office",
    ),

    # Mobile
    VendorEntry(
        name="Mobile Operators",
        patterns=[
            "three ireland", "vodafone", "eir mobile", "eir broadband", "eir bill", "eir.ie",
            "eir account", "48", "gomo", "tesco mobile",
        ],
        category="Phone",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Phone/communications for business. VAT deductible under Section 59.",
        sector="telecoms",
    ),
    VendorEntry(
        name="Lycamobile / iD Mobile",
        patterns=["lycamobile", "id mobile"],
        category="Phone",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Mobile phone service. VAT deductible under Section 59.",
        sector="telecoms",
    ),

    # Insurance (exempt)
    VendorEntry(
        name="Business Insurance",
        patterns=["axa", "allianz", "fbd", "liberty insurance"],
        category="Insurance",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Business insurance premium. VAT exempt - no VAT to claim.",
        sector="insurance",
    ),
    VendorEntry(
        name="Zurich Insurance",
        patterns=["zurich insurance", "zurich general"],
        category="Insurance",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Business insurance premium. VAT exempt.",
        sector="insurance",
    ),
    VendorEntry(
        name="Aviva Insurance",
        patterns=["aviva insurance", "aviva general"],
        category="Insurance",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Business insurance premium. VAT exempt.",
        sector="insurance",
    ),
    VendorEntry(
        name="RSA Insurance",
        patterns=["rsa insurance", "rsa ireland"],
        category="Insurance",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Business insurance premium. VAT exempt.",
        sector="insurance",
    ),
    VendorEntry(
        name="Chubb Insurance",
        patterns=["chubb"],
        category="Insurance",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Business insurance premium. VAT exempt.",
        sector="insurance",
    ),

    # Health insurance relief
    VendorEntry(
        name="Health Insurance",
        patterns=["vhi", "laya healthcare", "laya health", "irish life health", "glo health"],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="health_insurance",
        purpose="Health insurance premium. Tax relief at source (TRS). Section 470 TCA 1997.",
        sector="health",
    ),

    # Pharmacy
    VendorEntry(
        name="Pharmacy / Chemist",
        patterns=[
            "pharmacy", "chemist", "boots", "lloyds pharmacy", "mccabes", "hickeys",
            "sam mccauley", "cara pharmacy", "totalhealth", "allcare",
        ],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="medical",
        purpose="Pharmacy/prescription expense. Eligible for 20% tax relief under Section 469 TCA 1997.",
        sector="health",
    ),

    # Medical relief
    VendorEntry(
        name="Medical / Hospital",
        patterns=[
            "physio", "physiotherapy", "dental surgery", "orthodont", "oral surgery",
            "hospital", "consultant", "surgeon", "dermatolog", "fertility", "ivf",
            "mater private", "blackrock clinic", "beacon hospital", "st vincent",
            "galway clinic", "bon secours",
        ],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="medical",
        purpose="Non-routine medical expense. Eligible for 20% tax relief under Section 469 TCA 1997.",
        sector="health",
    ),
    VendorEntry(
        name="Specsavers / Vision Express",
        patterns=["specsavers", "vision express"],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="medical",
        purpose="Optician services. Eligible for 20% tax relief under Section 469 TCA 1997.",
        sector="health",
    ),
    VendorEntry(
        name="Dental Practices",
        patterns=["dental", "dentist", "dental care", "dental clinic"],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="medical",
        purpose="Dental expense. Eligible for 20% tax relief under Section 469 TCA 1997.",
        sector="health",
    ),
    VendorEntry(
        name="Smiles Dental",
        patterns=["smiles dental"],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="medical",
        purpose="Dental chain. Eligible for 20% tax relief under Section 469 TCA 1997.",
        sector="health",
    ),
    VendorEntry(
        name="GP / Doctor",
        patterns=["medical centre", "health centre", "gp surgery", "doctor", "dr "],
        category="Medical",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="medical",
        purpose="GP/doctor visit. Eligible for 20% tax relief under Section 469 TCA 1997.",
        sector="health",
    ),

    # Pensions
    VendorEntry(
        name="Pension Providers",
        patterns=[
            "irish life pension", "zurich pension", "aviva pension", "new ireland",
            "standard life",
        ],
        category="Insurance",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="pension",
        purpose="Pension contribution. Tax relief at marginal rate. Section 774 TCA 1997.",
        sector="finance",
    ),

    # Charities
    VendorEntry(
        name="Charities",
        patterns=[
            "trocaire", "concern worldwide", "goal", "svp", "st vincent de paul",
            "unicef ireland", "irish cancer society", "pieta house", "barnardos",
        ],
        category="other",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="charitable",
        purpose="Charitable donation. Tax relief under Section 848A TCA 1997 (min €250).",
        sector="charity",
    ),
    VendorEntry(
        name="Additional Charities",
        patterns=[
            "oxfam", "amnesty", "irish heart", "irish red cross", "irish guide dogs",
            "focus ireland", "simon community", "alone", "temple street", "crumlin hospital",
        ],
        category="other",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="charitable",
        purpose="Charitable donation. Tax relief under Section 848A TCA 1997 (min €250).",
        sector="charity",
    ),

    # Professional services
    VendorEntry(
        name="Accounting / Tax Services",
        patterns=["accountant", "accounting", "tax return", "vat return"],
        category="Consulting & Accounting",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Accounting/tax services. VAT deductible under Section 59.",
        sector="professional",
    ),
    VendorEntry(
        name="Solicitor / Legal",
        patterns=["solicitor", "solicitors", "legal fee", "law firm", "barrister"],
        category="Consulting & Accounting",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Legal/professional services. VAT deductible under Section 59.",
        sector="professional",
    ),
    VendorEntry(
        name="Architects / Engineers",
        patterns=["architect", "engineering consultants", "quantity surveyor", "surveyor"],
        category="Consulting & Accounting",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Professional services. VAT deductible under Section 59.",
        sector="professional",
    ),

    # Workwear and PPE
    VendorEntry(
        name="Workwear / PPE",
        patterns=["workwear", "work clothes", "hi-vis", "safety boots", "ppe"],
        category="Workwear",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Workwear/PPE for business. VAT deductible under Section 59.",
        sector="trade",
    ),

    # Advertising
    VendorEntry(
        name="Advertising Platforms",
        patterns=[
            "facebook ads", "google ads", "instagram", "linkedin", "vistaprint", "advertising",
        ],
        category="Advertising",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Advertising expense. VAT deductible under Section 59.",
        sector="marketing",
    ),
    VendorEntry(
        name="TikTok / Pinterest Ads",
        patterns=["tiktok ads", "pinterest ads", "twitter ads", "x ads"],
        category="Advertising",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Social media advertising. VAT deductible under Section 59.",
        sector="marketing",
    ),
    VendorEntry(
        name="Golden Pages / Yell",
        patterns=["golden pages", "yell.com", "yell ireland"],
        category="Advertising",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Business directory advertising. VAT deductible under Section 59.",
        sector="marketing",
    ),

    # Broadband
    VendorEntry(
        name="Broadband Providers",
        patterns=["virgin media", "sky ireland", "pure telecom", "digiweb", "imagine broadband"],
        category="Phone",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Broadband/internet service. Business portion VAT deductible under Section 59.",
        sector="telecoms",
    ),
    VendorEntry(
        name="SIRO / National Broadband",
        patterns=["siro", "national broadband", "nbi"],
        category="Phone",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Broadband service. Business portion VAT deductible under Section 59.",
        sector="telecoms",
    ),

    # Professional bodies
    VendorEntry(
        name="Professional Bodies",
        patterns=[
            "cif", "engineers ireland", "law society", "cpa ireland", "acca",
            "chartered accountants", "riai", "reci", "cro annual return",
        ],
        category="Consulting & Accounting",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Professional body membership/registration. Allowable business expense.",
        sector="professional",
    ),

    # Training and certification
    VendorEntry(
        name="Training / Certification",
        patterns=[
            "safe pass", "solas", "cscs card", "qqi", "city & guilds", "fetac",
            "manual handling", "first aid course", "iosh", "citb",
        ],
        category="Training",
        vat_type="Standard 23%",
        vat_deductible=True,
        is_trade_supplier=True,
        purpose="Training/certification for business. VAT deductible under Section 59.",
        sector="training",
    ),
    VendorEntry(
        name="EHS International",
        patterns=["ehs international", "ehs intl"],
        category="Training",
        vat_type="Standard 23%",
        vat_deductible=True,
        is_trade_supplier=True,
        purpose="Safe Pass / health & safety training and certification. VAT deductible under Section 59.",
        sector="training",
    ),

    # Motor tax
    VendorEntry(
        name="Motor Tax",
        patterns=["motor tax", "dublin city", "motor tax online", "motortax"],
        category="Motor Vehicle Expenses",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Motor tax for business vehicle. Exempt from VAT. Allowable business expense.",
        sector="motor",
    ),

    # Scrap and used parts
    VendorEntry(
        name="Vehicle Parts / Scrap",
        patterns=[
            "car dismantlers", "kilcock car", "scrap yard", "breakers yard", "auto parts",
            "car parts",
        ],
        category="Motor/travel",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle parts/scrap for business vehicle. VAT deductible under Section 59.",
        sector="motor",
    ),

    # Flooring and materials
    VendorEntry(
        name="Havwoods",
        patterns=["havwoods", "havwood"],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        is_trade_supplier=True,
        purpose="Flooring materials supplier. VAT deductible under Section 59.",
        sector="trade",
    ),
    VendorEntry(
        name="TJ O'Mahony",
        patterns=[
            "tj o'mahony", "tj omahony", "tj o mahony", "o'mahony", "omahony", "tj o'mahoney",
            "tj omahoney", "tj o mahoney", "o'mahoney", "omahoney builders",
        ],
        category="Materials",
        vat_type="Standard 23%",
        vat_deductible=True,
        is_trade_supplier=True,
        purpose="Building materials supplier. VAT deductible under Section 59.",
        sector="trade",
    ),

    # Conferences
    VendorEntry(
        name="Conferences / Events",
        patterns=[
            "startupnetwork", "startup network", "conference", "summit", "expo", "convention",
        ],
        category="Training",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Business conference/networking event. VAT deductible under Section 59.",
        sector="training",
    ),

    # Branding
    VendorEntry(
        name="Branding / Design",
        patterns=["looka", "logo maker", "logo design", "brand design", "fiverr", "99designs"],
        category="Marketing",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Company branding/logo design. VAT deductible under Section 59.",
        sector="marketing",
    ),

    # Waste
    VendorEntry(
        name="Waste Disposal",
        patterns=[
            "barna recycling", "greenstar", "panda waste", "panda", "thorntons recycling",
            "country clean", "oxigen", "skip hire", "greyhound recycling",
        ],
        category="Waste",
        vat_type="Standard 23%",
        vat_deductible=True,
        is_trade_supplier=True,
        purpose="Waste disposal/skip hire. VAT deductible under Section 59.",
        sector="waste",
    ),
    VendorEntry(
        name="City Bin / KeyWaste",
        patterns=["city bin", "keywaste", "key waste"],
        category="Waste",
        vat_type="Standard 23%",
        vat_deductible=True,
        is_trade_supplier=True,
        purpose="Waste collection. VAT deductible under Section 59.",
        sector="waste",
    ),

    # Tuition relief
    VendorEntry(
        name="Universities / Colleges",
        patterns=[
            "ucd", "tcd", "trinity college", "dcu", "nuig", "university of galway", "ucc",
            "maynooth university", "tu dublin", "technological university", "griffith college",
            "ncad", "rcsi", "dit", "athlone it", "waterford it", "letterkenny it", "sligo it",
            "carlow it", "dundalk it", "limerick it",
        ],
        category="other",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="tuition",
        purpose="Tuition fees. 20% tax relief on qualifying fees over EUR 3,000. Section 473A TCA 1997.",
        sector="education",
    ),
    VendorEntry(
        name="Technological Universities",
        patterns=["atu", "mtu", "setu", "tus"],
        category="other",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="tuition",
        purpose="Tuition fees. 20% tax relief on qualifying fees over EUR 3,000. Section 473A TCA 1997.",
        sector="education",
    ),

    # Personal rent relief
    VendorEntry(
        name="Rent Payments",
        patterns=["rent payment", "monthly rent", "residential tenancies", "rtb registration"],
        category="Rent",
        vat_type="Exempt",
        vat_deductible=False,
        relief_type="rent",
        purpose="Rent payment. Rent tax credit up to EUR 750 (single) / EUR 1,500 (couple). Section 473B TCA 1997.",
        sector="property",
    ),

    # Investment platforms
    VendorEntry(
        name="Investment Platforms",
        patterns=[
            "degiro", "interactive brokers", "trading 212", "etoro", "revolut trading", "ibkr",
        ],
        category="other",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Investment/brokerage platform. Review for CGT reporting in Form 11 Section 7.",
        sector="finance",
    ),

    # Utilities and post
    VendorEntry(
        name="ESB / Electric Ireland",
        patterns=["esb", "electric ireland", "esb networks"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Electricity supply. Business portion VAT deductible under Section 59.",
        sector="utilities",
    ),
    VendorEntry(
        name="Bord Gais / Gas Networks",
        patterns=["bord gais", "bord gáis", "gas networks", "flogas", "calor gas"],
        category="General Expenses",
        vat_type="Reduced 13.5%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Gas supply. Business portion VAT deductible under Section 59.",
        sector="utilities",
    ),
    VendorEntry(
        name="Irish Water",
        patterns=["irish water", "uisce eireann", "uisce éireann"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Water supply. Business portion VAT deductible under Section 59.",
        sector="utilities",
    ),
    VendorEntry(
        name="An Post",
        patterns=["an post", "anpost", "post office"],
        category="Office",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Postal services. VAT deductible under Section 59.",
        sector="utilities",
    ),
    VendorEntry(
        name="SSE Airtricity",
        patterns=["sse airtricity", "airtricity"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Electricity/gas supply. Business portion VAT deductible under Section 59.",
        sector="utilities",
    ),
    VendorEntry(
        name="Panda Power / Pinergy",
        patterns=["panda power", "pinergy", "energia"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Energy supply. Business portion VAT deductible under Section 59.",
        sector="utilities",
    ),
    VendorEntry(
        name="DHL / Fastway / Courier",
        patterns=["dhl", "fastway", "dpd", "gls", "fedex", "ups", "parcel motel"],
        category="Office",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Courier/delivery service. VAT deductible under Section 59.",
        sector="logistics",
    ),

    # Government and regulators
    VendorEntry(
        name="Companies Registration Office",
        patterns=["cro", "companies registration", "company registration"],
        category="Consulting & Accounting",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Company registration/annual return filing. Allowable business expense.",
        sector="government",
    ),
    VendorEntry(
        name="NSAI",
        patterns=["nsai", "national standards authority"],
        category="Consulting & Accounting",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Standards certification. Allowable business expense.",
        sector="government",
    ),
    VendorEntry(
        name="HSA",
        patterns=["health and safety authority", "hsa fee"],
        category="Training",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Health & Safety Authority fee. Allowable business expense.",
        sector="government",
    ),
    VendorEntry(
        name="SEAI",
        patterns=["seai", "sustainable energy authority"],
        category="Training",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="SEAI registration/BER certification. Allowable business expense.",
        sector="government",
    ),
    VendorEntry(
        name="Local Authority / County Council",
        patterns=[
            "county council", "city council", "local authority", "planning permission",
            "comhairle",
        ],
        category="Consulting & Accounting",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Local authority fees/charges. Allowable business expense.",
        sector="government",
    ),

    # Public transport and airlines
    VendorEntry(
        name="Bus Eireann",
        patterns=["bus eireann", "bus éireann", "buseireann"],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Public transport. Zero-rated.",
        sector="transport",
    ),
    VendorEntry(
        name="Dublin Bus / Go-Ahead",
        patterns=["dublin bus", "go-ahead ireland", "go ahead"],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Public transport. Zero-rated.",
        sector="transport",
    ),
    VendorEntry(
        name="Luas",
        patterns=["luas", "transdev"],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Luas tram service. Zero-rated public transport.",
        sector="transport",
    ),
    VendorEntry(
        name="Irish Rail / Iarnrod Eireann",
        patterns=["iarnrod eireann", "iarnród éireann", "irish rail", "dart"],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Train service. Zero-rated public transport.",
        sector="transport",
    ),
    VendorEntry(
        name="Ryanair",
        patterns=["ryanair"],
        category="Travel & Subsistence",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Flight booking. Zero-rated international transport.",
        sector="transport",
    ),
    VendorEntry(
        name="Aer Lingus",
        patterns=["aer lingus", "aerlingus"],
        category="Travel & Subsistence",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Flight booking. Zero-rated international transport.",
        sector="transport",
    ),
    VendorEntry(
        name="Leap Card",
        patterns=["leap card", "leap top", "tfi leap"],
        category="Motor/travel",
        vat_type="Zero",
        vat_deductible=True,
        purpose="Public transport top-up. Zero-rated.",
        sector="transport",
    ),
    VendorEntry(
        name="Enterprise Car Hire",
        patterns=["enterprise rent", "hertz", "europcar", "sixt", "avis", "budget car"],
        category="Motor/travel",
        vat_type="Standard 23%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Vehicle rental for business. VAT deductible under Section 59.",
        sector="transport",
    ),

    # Payment processors
    VendorEntry(
        name="PayPal",
        patterns=["paypal"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Payment processor. Review: could be fee or purchase. Financial services are VAT exempt.",
        is_tech_supplier=True,
        sector="payments",
    ),
    VendorEntry(
        name="Wise (TransferWise)",
        patterns=["wise", "transferwise", "wise.com"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Money transfer service. Financial services are VAT exempt.",
        is_tech_supplier=True,
        sector="payments",
    ),
    VendorEntry(
        name="Revolut Transfer",
        patterns=["revolut transfer", "revolut payment", "revolut to"],
        category="Internal Transfer",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Revolut transfer. Review if internal transfer or payment.",
        is_tech_supplier=True,
        sector="payments",
    ),
    VendorEntry(
        name="SumUp",
        patterns=["sumup", "sum up"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Card payment terminal fees. Financial services are VAT exempt.",
        is_tech_supplier=True,
        sector="payments",
    ),
    VendorEntry(
        name="Square",
        patterns=["square", "sq *"],
        category="Bank fees",
        vat_type="Exempt",
        vat_deductible=False,
        purpose="Card payment processing fees. Financial services are VAT exempt.",
        is_tech_supplier=True,
        sector="payments",
    ),

    # Cleaning
    VendorEntry(
        name="Cleaning Services",
        patterns=["cleaning service", "commercial cleaning", "office cleaning", "janitor"],
        category="Cleaning",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Cleaning services. VAT deductible under Section 59.",
        sector="services",
    ),

    # Stationery
    VendorEntry(
        name="Reads / Eason",
        patterns=["reads", "eason", "easons"],
        category="Office",
        vat_type="Standard 23%",
        vat_deductible=True,
        needs_receipt=True,
        purpose="Stationery/books. VAT deductible if for business use.",
        sector="office",
    ),

    # Security
    VendorEntry(
        name="Security Services",
        patterns=["chubb security", "securitas", "g4s", "manguard", "security alarm"],
        category="General Expenses",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Security services/alarm monitoring. VAT deductible under Section 59.",
        sector="services",
    ),

    # Car dealers and leasing
    VendorEntry(
        name="Car Dealers",
        patterns=["joe duffy", "windsor motor", "spirit motor", "msl motor", "frank keane"],
        category="Motor Vehicle Expenses",
        vat_type="Standard 23%",
        vat_deductible=False,
        needs_receipt=True,
        purpose="Vehicle dealer. Review: purchase vs servicing. Note: VAT on vehicle purchase not deductible for most businesses.",
        sector="motor",
    ),
    VendorEntry(
        name="Vehicle Leasing",
        patterns=["ayvens", "leasplan", "ald automotive", "arval", "vehicle leasing"],
        category="Motor Vehicle Expenses",
        vat_type="Standard 23%",
        vat_deductible=True,
        purpose="Vehicle leasing. VAT deductible (up to limits) for business vehicles.",
        sector="motor",
    ),
]


def get_total_pattern_count(entries: Optional[Sequence[VendorEntry]] = None) -> int:
    """Total number of match patterns across the table."""
    entries = VENDOR_DATABASE if entries is None else entries
    return sum(len(entry.patterns) for entry in entries)


def get_used_categories(entries: Optional[Sequence[VendorEntry]] = None) -> List[str]:
    """Distinct categories in first-seen table order."""
    entries = VENDOR_DATABASE if entries is None else entries
    seen: Dict[str, None] = {}
    for entry in entries:
        seen.setdefault(entry.category, None)
    return list(seen)


def get_vendors_by_sector(sector: str, entries: Optional[Sequence[VendorEntry]] = None) -> List[VendorEntry]:
    entries = VENDOR_DATABASE if entries is None else entries
    return [entry for entry in entries if entry.sector == sector]


def check_vendor_database(entries: Sequence[VendorEntry]) -> List[str]:
    """
    Collect integrity problems in a vendor table.

    Args:
        entries: Vendor rows to check

    Returns:
        List of human-readable problems (empty when the table is valid)
    """
    errors = []
    for idx, entry in enumerate(entries):
        label = entry.name or f"entry #{idx}"
        if not entry.name:
            errors.append(f"entry #{idx}: missing name")
        if not entry.patterns:
            errors.append(f"{label}: no patterns")
        if not entry.category:
            errors.append(f"{label}: missing category")
        if not entry.vat_type:
            errors.append(f"{label}: missing vat_type")
        if not entry.purpose:
            errors.append(f"{label}: missing purpose")
        for pattern in entry.patterns:
            if not pattern or not pattern.strip():
                errors.append(f"{label}: empty pattern")
            elif pattern != pattern.lower():
                errors.append(f'{label}: pattern "{pattern}" is not lowercase')
        if entry.vat_type == "Exempt" and entry.vat_deductible:
            errors.append(f"{label}: exempt VAT type cannot be deductible")
        if entry.relief_type is not None and entry.relief_type not in RELIEF_TYPES:
            errors.append(f"{label}: unknown relief type {entry.relief_type!r}")
    return errors


def validate_vendor_database(entries: Optional[Sequence[VendorEntry]] = None) -> None:
    """
    Validate a vendor table, raising on the first load of a bad table.

    Raises:
        RuleTableError: If any entry is malformed
    """
    entries = VENDOR_DATABASE if entries is None else entries
    errors = check_vendor_database(entries)
    if errors:
        raise RuleTableError("vendor database", errors)


validate_vendor_database(VENDOR_DATABASE)
