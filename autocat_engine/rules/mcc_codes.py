"""
Merchant Category Code (MCC) table.

Used only when no name-based vendor pattern matched. Codes follow the
ISO 18245 / card-scheme lists, mapped onto the same categories and Irish
VAT types as the vendor table.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .vendor_database import RELIEF_TYPES, RuleTableError


@dataclass(frozen=True)
class MCCMapping:
    """Category and VAT treatment for one merchant category code."""
    code: int
    description: str
    category: str
    vat_type: str
    vat_deductible: bool
    is_trade_supplier: bool = False
    needs_receipt: bool = False
    relief_type: Optional[str] = None


MCC_MAPPINGS: List[MCCMapping] = [
    # Agricultural / Contract Services
    MCCMapping(763, "Agricultural Co-operatives", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(780, "Landscaping/Horticultural", "Materials", "Standard 23%", True, is_trade_supplier=True),

    # Construction / Trade
    MCCMapping(1520, "General Contractors", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1711, "Heating/Plumbing/AC Contractors", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1731, "Electrical Contractors", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1740, "Masonry/Stonework/Tile", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1750, "Carpentry Contractors", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1761, "Roofing/Siding/Sheet Metal", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1771, "Concrete Work Contractors", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(1799, "Special Trade Contractors", "Materials", "Standard 23%", True, is_trade_supplier=True),

    # Airlines
    MCCMapping(3000, "Airlines (general)", "Travel & Subsistence", "Zero", True),
    MCCMapping(3148, "Aer Lingus", "Travel & Subsistence", "Zero", True),
    MCCMapping(3246, "Ryanair", "Travel & Subsistence", "Zero", True),
    MCCMapping(4511, "Airlines/Air Carriers", "Travel & Subsistence", "Zero", True),

    # Car Rental
    MCCMapping(3351, "Car Rental (general)", "Motor/travel", "Standard 23%", True, needs_receipt=True),
    MCCMapping(7512, "Car Rental", "Motor/travel", "Standard 23%", True, needs_receipt=True),

    # Hotels / Accommodation
    MCCMapping(3501, "Hotels (general)", "Subsistence", "Reduced 13.5%", False),
    MCCMapping(7011, "Hotels/Motels/Resorts", "Subsistence", "Reduced 13.5%", False),
    MCCMapping(7012, "Timeshares", "Subsistence", "Reduced 13.5%", False),

    # Transportation
    MCCMapping(4011, "Railways", "Motor/travel", "Zero", True),
    MCCMapping(4111, "Local Commuter Transport", "Motor/travel", "Zero", True),
    MCCMapping(4112, "Passenger Railways", "Motor/travel", "Zero", True),
    MCCMapping(4121, "Taxicabs/Limousines", "Motor/travel", "Reduced 13.5%", True, needs_receipt=True),
    MCCMapping(4131, "Bus Lines", "Motor/travel", "Zero", True),
    MCCMapping(4214, "Motor Freight/Delivery", "Office", "Standard 23%", True),
    MCCMapping(4215, "Courier Services", "Office", "Standard 23%", True),
    MCCMapping(4411, "Steamship/Cruise Lines", "Motor/travel", "Zero", True),
    MCCMapping(4457, "Boat Rental/Leasing", "Motor/travel", "Standard 23%", True),
    MCCMapping(4468, "Marinas/Marine Service", "Motor/travel", "Standard 23%", True),
    MCCMapping(4722, "Travel Agencies", "Travel & Subsistence", "Standard 23%", True),
    MCCMapping(4784, "Bridge and Road Tolls", "Motor/travel", "Zero", True),
    MCCMapping(4789, "Transportation (other)", "Motor/travel", "Standard 23%", True),

    # Utilities
    MCCMapping(4812, "Telecommunication Equipment", "Phone", "Standard 23%", True),
    MCCMapping(4814, "Telecommunication Services", "Phone", "Standard 23%", True),
    MCCMapping(4816, "Computer Network/Information Services", "Software", "Standard 23%", True),
    MCCMapping(4821, "Telegraph Services", "Phone", "Standard 23%", True),
    MCCMapping(4829, "Wire Transfers/Money Orders", "Bank fees", "Exempt", False),
    MCCMapping(4899, "Cable/Pay TV", "Phone", "Standard 23%", True),
    MCCMapping(4900, "Utilities (Electric/Gas/Water/Sanitary)", "General Expenses", "Standard 23%", True, needs_receipt=True),

    # Retail - Hardware / Building
    MCCMapping(5013, "Motor Vehicle Supplies/Parts (wholesale)", "Motor/travel", "Standard 23%", True),
    MCCMapping(5021, "Office/Commercial Furniture", "Office", "Standard 23%", True),
    MCCMapping(5039, "Construction Materials (wholesale)", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5044, "Photographic/Copy/Fax Equipment", "Equipment", "Standard 23%", True),
    MCCMapping(5045, "Computers/Peripherals/Software", "Equipment", "Standard 23%", True),
    MCCMapping(5046, "Commercial Equipment", "Equipment", "Standard 23%", True),
    MCCMapping(5047, "Medical/Dental/Ophthalmic Equipment", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(5051, "Metal Services/Wire Products", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5065, "Electrical Parts/Equipment", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5072, "Hardware/Tools (wholesale)", "Tools", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5074, "Plumbing/Heating (wholesale)", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5085, "Industrial Supplies", "Materials", "Standard 23%", True, is_trade_supplier=True),

    # Retail - General
    MCCMapping(5111, "Stationery/Office Supplies", "Office", "Standard 23%", True),
    MCCMapping(5131, "Piece Goods/Fabrics", "Materials", "Standard 23%", True),
    MCCMapping(5137, "Uniforms/Commercial Clothing", "Workwear", "Standard 23%", True),
    MCCMapping(5139, "Commercial Footwear", "Workwear", "Standard 23%", True),
    MCCMapping(5169, "Chemicals (wholesale)", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5172, "Petroleum/Petroleum Products", "General Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5192, "Books/Periodicals/Newspapers", "Office", "Zero", True),
    MCCMapping(5193, "Florists/Nursery Supplies", "Materials", "Reduced 13.5%", True),
    MCCMapping(5198, "Paints/Varnishes", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5199, "Nondurable Goods", "Materials", "Standard 23%", True),
    MCCMapping(5200, "Home Supply Warehouse", "Materials", "Standard 23%", True, is_trade_supplier=True, needs_receipt=True),
    MCCMapping(5211, "Lumber/Building Materials", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5231, "Glass/Paint/Wallpaper", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5251, "Hardware Stores", "Tools", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5261, "Nurseries/Lawn/Garden Supplies", "Materials", "Reduced 13.5%", True),

    # Retail - General Merchandise
    MCCMapping(5300, "Wholesale Clubs", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5309, "Duty Free Stores", "Drawings", "Zero", False),
    MCCMapping(5310, "Discount Stores", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5311, "Department Stores", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5331, "Variety Stores", "Drawings", "Standard 23%", False, needs_receipt=True),

    # Retail - Food / Groceries
    MCCMapping(5411, "Grocery Stores/Supermarkets", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5422, "Freezer/Meat Lockers", "Drawings", "Standard 23%", False),
    MCCMapping(5441, "Candy/Confectionery", "Drawings", "Standard 23%", False),
    MCCMapping(5451, "Dairy Products", "Drawings", "Zero", False),
    MCCMapping(5462, "Bakeries", "Drawings", "Zero", False),
    MCCMapping(5499, "Convenience Stores/Speciality Markets", "Drawings", "Standard 23%", False, needs_receipt=True),

    # Motor Vehicles
    MCCMapping(5511, "Car/Truck Dealers (New/Used)", "Motor Vehicle Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5521, "Car/Truck Dealers (Used)", "Motor Vehicle Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5531, "Auto/Home Supply Stores", "Motor/travel", "Standard 23%", True),
    MCCMapping(5532, "Automotive Tyre Stores", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(5533, "Auto Parts/Accessories", "Motor/travel", "Standard 23%", True),
    MCCMapping(5541, "Service Stations (Fuel)", "General Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5542, "Automated Fuel Dispensers", "General Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5551, "Boat Dealers", "Motor Vehicle Expenses", "Standard 23%", False),
    MCCMapping(5571, "Motorcycle Dealers", "Motor Vehicle Expenses", "Standard 23%", False),

    # Clothing / Apparel
    MCCMapping(5611, "Men's/Boys' Clothing", "Drawings", "Standard 23%", False),
    MCCMapping(5621, "Women's Clothing", "Drawings", "Standard 23%", False),
    MCCMapping(5631, "Women's Accessories", "Drawings", "Standard 23%", False),
    MCCMapping(5641, "Children's/Infants' Clothing", "Drawings", "Zero", False),
    MCCMapping(5651, "Family Clothing", "Drawings", "Standard 23%", False),
    MCCMapping(5655, "Sports/Riding Apparel", "Drawings", "Standard 23%", False),
    MCCMapping(5661, "Shoe Stores", "Drawings", "Standard 23%", False),
    MCCMapping(5691, "Men's/Women's Clothing", "Drawings", "Standard 23%", False),
    MCCMapping(5699, "Clothing/Accessories (misc)", "Drawings", "Standard 23%", False),

    # Home / Furniture
    MCCMapping(5712, "Furniture/Home Furnishings", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5713, "Floor Covering Stores", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5714, "Drapery/Window Covering", "Drawings", "Standard 23%", False),
    MCCMapping(5718, "Fireplace/Accessories", "Materials", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(5719, "Miscellaneous Home Furnishings", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5722, "Household Appliances", "Drawings", "Standard 23%", False, needs_receipt=True),

    # Electronics / Computers
    MCCMapping(5732, "Electronics Stores", "Equipment", "Standard 23%", True, needs_receipt=True),
    MCCMapping(5733, "Music Stores/Instruments", "Drawings", "Standard 23%", False),
    MCCMapping(5734, "Computer Software Stores", "Software", "Standard 23%", True),
    MCCMapping(5735, "Record Stores", "Drawings", "Standard 23%", False),

    # Food / Restaurants
    MCCMapping(5812, "Eating Places/Restaurants", "Meals & Entertainment", "Standard 23%", False),
    MCCMapping(5813, "Bars/Cocktail Lounges/Pubs", "Meals & Entertainment", "Standard 23%", False),
    MCCMapping(5814, "Fast Food Restaurants", "Meals & Entertainment", "Standard 23%", False),

    # Retail - Misc
    MCCMapping(5912, "Drug Stores/Pharmacies", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(5921, "Package Stores (Beer/Wine/Liquor)", "Drawings", "Standard 23%", False),
    MCCMapping(5931, "Used Merchandise/Second-Hand", "Drawings", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5941, "Sporting Goods", "Drawings", "Standard 23%", False),
    MCCMapping(5942, "Book Stores", "Office", "Zero", True),
    MCCMapping(5943, "Stationery Stores", "Office", "Standard 23%", True),
    MCCMapping(5944, "Jewelry Stores/Watches", "Drawings", "Standard 23%", False),
    MCCMapping(5945, "Hobby/Toy/Game Shops", "Drawings", "Standard 23%", False),
    MCCMapping(5946, "Camera/Photographic Supplies", "Equipment", "Standard 23%", True, needs_receipt=True),
    MCCMapping(5947, "Gift/Card/Novelty Shops", "Drawings", "Standard 23%", False),
    MCCMapping(5948, "Luggage/Leather Goods", "Drawings", "Standard 23%", False),
    MCCMapping(5970, "Artist Supply/Craft Stores", "Materials", "Standard 23%", True, needs_receipt=True),
    MCCMapping(5971, "Art Dealers/Galleries", "Drawings", "Reduced 13.5%", False),
    MCCMapping(5972, "Stamp/Coin Stores", "Drawings", "Exempt", False),
    MCCMapping(5977, "Cosmetic Stores", "Drawings", "Standard 23%", False),
    MCCMapping(5983, "Fuel Dealers (Non-Automotive)", "General Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(5992, "Florists", "Drawings", "Reduced 13.5%", False),
    MCCMapping(5993, "Cigar Stores/Tobacconists", "Drawings", "Standard 23%", False),
    MCCMapping(5994, "Newsagents", "Office", "Zero", True),
    MCCMapping(5995, "Pet Shops", "Drawings", "Standard 23%", False),
    MCCMapping(5999, "Miscellaneous/Speciality Retail", "Drawings", "Standard 23%", False, needs_receipt=True),

    # Services
    MCCMapping(6010, "Financial Institutions (Manual Cash)", "Bank fees", "Exempt", False),
    MCCMapping(6011, "Automated Cash (ATM)", "Bank fees", "Exempt", False),
    MCCMapping(6012, "Financial Institutions (Merchandise)", "Bank fees", "Exempt", False),
    MCCMapping(6051, "Non-Financial Institutions (Foreign Currency/Money Orders)", "Bank fees", "Exempt", False),
    MCCMapping(6211, "Security Brokers/Dealers", "other", "Exempt", False),
    MCCMapping(6300, "Insurance (general)", "Insurance", "Exempt", False),
    MCCMapping(6513, "Real Estate Agents/Rentals", "Rent", "Exempt", False),

    # Professional Services
    MCCMapping(7011, "Lodging (Hotels/Motels)", "Subsistence", "Reduced 13.5%", False),
    MCCMapping(7210, "Laundry/Cleaning Services", "Cleaning", "Standard 23%", True),
    MCCMapping(7211, "Laundry Services", "Cleaning", "Standard 23%", True),
    MCCMapping(7216, "Dry Cleaners", "Cleaning", "Standard 23%", True),
    MCCMapping(7230, "Beauty/Barber Shops", "Drawings", "Standard 23%", False),
    MCCMapping(7251, "Shoe Repair/Hat Cleaning", "Drawings", "Standard 23%", False),
    MCCMapping(7261, "Funeral Services", "other", "Exempt", False),
    MCCMapping(7273, "Dating/Escort Services", "Drawings", "Standard 23%", False),
    MCCMapping(7276, "Tax Preparation Services", "Consulting & Accounting", "Standard 23%", True),
    MCCMapping(7277, "Counseling Services", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(7278, "Buying/Shopping Services", "other", "Standard 23%", True),
    MCCMapping(7296, "Clothing Rental", "Drawings", "Standard 23%", False),
    MCCMapping(7297, "Massage Parlours", "Drawings", "Standard 23%", False),
    MCCMapping(7298, "Health Spas", "Drawings", "Standard 23%", False),
    MCCMapping(7299, "Miscellaneous Personal Services", "other", "Standard 23%", True, needs_receipt=True),

    # Business Services
    MCCMapping(7311, "Advertising Services", "Advertising", "Standard 23%", True),
    MCCMapping(7333, "Commercial Photography/Graphics", "Marketing", "Standard 23%", True),
    MCCMapping(7338, "Quick Copy/Reproduction", "Office", "Standard 23%", True),
    MCCMapping(7339, "Stenographic/Secretarial Services", "Office", "Standard 23%", True),
    MCCMapping(7342, "Exterminating/Disinfecting", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(7349, "Cleaning/Maintenance/Janitorial", "Cleaning", "Standard 23%", True),
    MCCMapping(7361, "Employment Agencies/Temp Help", "Wages", "Standard 23%", True),
    MCCMapping(7372, "Computer Programming/Data Processing", "Software", "Standard 23%", True),
    MCCMapping(7375, "Information Retrieval Services", "Software", "Standard 23%", True),
    MCCMapping(7379, "Computer Maintenance/Repair", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(7392, "Management/Consulting Services", "Consulting & Accounting", "Standard 23%", True),
    MCCMapping(7393, "Detective/Protective/Security", "General Expenses", "Standard 23%", True),
    MCCMapping(7394, "Equipment Rental/Leasing", "Equipment", "Standard 23%", True),
    MCCMapping(7395, "Photo Developing", "Office", "Standard 23%", True),
    MCCMapping(7399, "Business Services (miscellaneous)", "other", "Standard 23%", True, needs_receipt=True),

    # Automotive Services
    MCCMapping(7511, "Truck Stop", "General Expenses", "Standard 23%", False, needs_receipt=True),
    MCCMapping(7523, "Parking Lots/Garages", "Motor/travel", "Standard 23%", True),
    MCCMapping(7531, "Automotive Body Repair", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(7534, "Tire Retreading/Repair", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(7535, "Automotive Paint Shops", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(7538, "Automotive Service Shops", "Repairs and Maintenance", "Standard 23%", True),
    MCCMapping(7542, "Car Washes", "Motor/travel", "Standard 23%", True),
    MCCMapping(7549, "Towing Services", "Motor/travel", "Standard 23%", True),

    # Entertainment / Recreation
    MCCMapping(7801, "Government Licensed Online Casinos", "Drawings", "Exempt", False),
    MCCMapping(7802, "Government Licensed Horse/Dog Racing", "Drawings", "Exempt", False),
    MCCMapping(7829, "Motion Picture/Video Distribution", "Drawings", "Standard 23%", False),
    MCCMapping(7832, "Motion Picture Theatres", "Drawings", "Standard 23%", False),
    MCCMapping(7841, "Video Tape Rental", "Drawings", "Standard 23%", False),
    MCCMapping(7911, "Dance Halls/Studios/Schools", "Drawings", "Standard 23%", False),
    MCCMapping(7922, "Theatrical Producers", "Drawings", "Standard 23%", False),
    MCCMapping(7929, "Bands/Orchestras/Entertainers", "Drawings", "Standard 23%", False),
    MCCMapping(7932, "Billiard/Pool Establishments", "Drawings", "Standard 23%", False),
    MCCMapping(7933, "Bowling Alleys", "Drawings", "Standard 23%", False),
    MCCMapping(7941, "Sports Clubs/Fields", "Drawings", "Standard 23%", False),
    MCCMapping(7991, "Tourist Attractions/Exhibits", "Drawings", "Standard 23%", False),
    MCCMapping(7992, "Golf Courses", "Drawings", "Standard 23%", False),
    MCCMapping(7993, "Video Amusement Game", "Drawings", "Standard 23%", False),
    MCCMapping(7994, "Video Game Arcades", "Drawings", "Standard 23%", False),
    MCCMapping(7995, "Betting (including Lottery)", "Drawings", "Exempt", False),
    MCCMapping(7996, "Amusement Parks/Carnivals", "Drawings", "Standard 23%", False),
    MCCMapping(7997, "Membership Clubs (Country/Athletic)", "Drawings", "Standard 23%", False),
    MCCMapping(7998, "Aquariums/Seaquariums", "Drawings", "Standard 23%", False),
    MCCMapping(7999, "Recreation Services", "Drawings", "Standard 23%", False),

    # Professional Services
    MCCMapping(8011, "Doctors (not elsewhere classified)", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8021, "Dentists/Orthodontists", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8031, "Osteopaths", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8041, "Chiropractors", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8042, "Optometrists/Ophthalmologists", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8043, "Opticians/Optical Goods", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8049, "Podiatrists/Chiropodists", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8050, "Nursing/Personal Care Facilities", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8062, "Hospitals", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8071, "Medical/Dental Labs", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8099, "Medical Services (misc)", "Medical", "Exempt", False, relief_type="medical"),
    MCCMapping(8111, "Legal Services", "Consulting & Accounting", "Standard 23%", True),
    MCCMapping(8211, "Schools (Elementary/Secondary)", "other", "Exempt", False, relief_type="tuition"),
    MCCMapping(8220, "Colleges/Universities", "other", "Exempt", False, relief_type="tuition"),
    MCCMapping(8241, "Correspondence Schools", "Training", "Exempt", False),
    MCCMapping(8244, "Business/Secretarial Schools", "Training", "Exempt", False),
    MCCMapping(8249, "Vocational/Trade Schools", "Training", "Standard 23%", True, is_trade_supplier=True),
    MCCMapping(8299, "Schools/Educational Services (misc)", "Training", "Exempt", False),
    MCCMapping(8351, "Child Care Services", "Drawings", "Exempt", False),
    MCCMapping(8398, "Charitable/Social Service Organizations", "other", "Exempt", False, relief_type="charitable"),
    MCCMapping(8641, "Civic/Social/Fraternal Associations", "other", "Exempt", False),
    MCCMapping(8651, "Political Organizations", "other", "Exempt", False),
    MCCMapping(8661, "Religious Organizations", "other", "Exempt", False),
    MCCMapping(8675, "Automobile Associations", "Motor/travel", "Standard 23%", True),
    MCCMapping(8699, "Membership Organizations", "Consulting & Accounting", "Exempt", False),
    MCCMapping(8734, "Testing Laboratories", "Consulting & Accounting", "Standard 23%", True),
    MCCMapping(8911, "Architectural/Engineering Services", "Consulting & Accounting", "Standard 23%", True),
    MCCMapping(8931, "Accounting/Auditing/Bookkeeping", "Consulting & Accounting", "Standard 23%", True),
    MCCMapping(8999, "Professional Services (misc)", "Consulting & Accounting", "Standard 23%", True),

    # Government Services
    MCCMapping(9211, "Court Costs", "Consulting & Accounting", "Exempt", False),
    MCCMapping(9222, "Fines", "other", "Exempt", False),
    MCCMapping(9223, "Bail/Bond Payments", "other", "Exempt", False),
    MCCMapping(9311, "Tax Payments", "other", "Exempt", False),
    MCCMapping(9399, "Government Services (misc)", "Consulting & Accounting", "Exempt", False),
    MCCMapping(9402, "Postal Services (Government)", "Office", "Standard 23%", True),
    MCCMapping(9405, "Intra-Government Purchases", "other", "Exempt", False),
]

# (low, high, representative code) - unknown codes inside a scheme range
# resolve to the range's generic entry
MCC_FALLBACK_RANGES: List[Tuple[int, int, int]] = [
    (3000, 3350, 3000),  # airlines
    (3351, 3500, 3351),  # car rental
    (3501, 3999, 3501),  # hotels
]


def _build_lookup(mappings: List[MCCMapping]) -> Dict[int, MCCMapping]:
    # Later rows win for a repeated code
    return {mapping.code: mapping for mapping in mappings}


_MCC_LOOKUP = _build_lookup(MCC_MAPPINGS)


def lookup_mcc(code: Optional[int]) -> Optional[MCCMapping]:
    """Exact lookup of a single MCC code."""
    if code is None:
        return None
    return _MCC_LOOKUP.get(code)


def lookup_mcc_with_fallback(code: Optional[int]) -> Optional[MCCMapping]:
    """
    Look up an MCC code, falling back to the generic entry of its range.

    Args:
        code: Merchant category code from the bank feed

    Returns:
        Matching MCCMapping, or None for an unknown code outside the ranges
    """
    exact = lookup_mcc(code)
    if exact is not None:
        return exact
    if code is None:
        return None

    for low, high, representative in MCC_FALLBACK_RANGES:
        if low <= code <= high:
            return _MCC_LOOKUP.get(representative)

    return None


def check_mcc_mappings(mappings: List[MCCMapping]) -> List[str]:
    errors = []
    for mapping in mappings:
        label = f"MCC {mapping.code}"
        if not mapping.description:
            errors.append(f"{label}: missing description")
        if not mapping.category:
            errors.append(f"{label}: missing category")
        if not mapping.vat_type:
            errors.append(f"{label}: missing vat_type")
        if mapping.vat_type == "Exempt" and mapping.vat_deductible:
            errors.append(f"{label}: exempt VAT type cannot be deductible")
        if mapping.relief_type is not None and mapping.relief_type not in RELIEF_TYPES:
            errors.append(f"{label}: unknown relief type {mapping.relief_type!r}")
    for _, _, representative in MCC_FALLBACK_RANGES:
        if representative not in _build_lookup(mappings):
            errors.append(f"fallback code {representative} has no mapping")
    return errors


def validate_mcc_mappings(mappings: Optional[List[MCCMapping]] = None) -> None:
    """Raise RuleTableError when the MCC table is malformed."""
    mappings = MCC_MAPPINGS if mappings is None else mappings
    errors = check_mcc_mappings(mappings)
    if errors:
        raise RuleTableError("MCC table", errors)


validate_mcc_mappings(MCC_MAPPINGS)
