"""
AgriModel Enumerations

Every categorical column persists the member NAME (``Enum(..., native_enum=False)``);
the member value is its display label and is only used on read.

Members that carry a rank/score are declared as ``(label, score)`` tuples.
"""

from __future__ import annotations

import enum


class LabeledEnum(enum.Enum):
    """Enum whose value is a display label, optionally followed by extra data."""

    def __new__(cls, label, *args):
        obj = object.__new__(cls)
        obj._value_ = label
        return obj

    def __init__(self, label, *args):
        self.label = label

    @classmethod
    def from_label(cls, label: str | None):
        """Case-insensitive lookup by label; None when nothing matches."""
        if label is None:
            return None
        wanted = label.strip().lower()
        for member in cls:
            if member.label.lower() == wanted:
                return member
        return None


class ScoredEnum(LabeledEnum):
    """Labeled enum with an ordinal score (higher is better or more severe)."""

    def __init__(self, label, score):
        super().__init__(label)
        self.score = score

    @classmethod
    def from_score(cls, score):
        for member in cls:
            if member.score == score:
                return member
        return None


# ─── Shared ─────────────────────────────────────────────────────────────────


class Season(LabeledEnum):
    SEASON_A = "Season A"
    SEASON_B = "Season B"
    SEASON_C = "Season C"
    ANNUAL = "Annual"
    OFF_SEASON = "Off Season"


class DataQuality(ScoredEnum):
    EXCELLENT = ("Excellent", 4)
    GOOD = ("Good", 3)
    FAIR = ("Fair", 2)
    POOR = ("Poor", 1)

    @property
    def is_reliable(self) -> bool:
        return self in (DataQuality.EXCELLENT, DataQuality.GOOD)


class ValidationStatus(LabeledEnum):
    PENDING = "Pending"
    VALIDATED = "Validated"
    REJECTED = "Rejected"


# ─── Inventory ──────────────────────────────────────────────────────────────


class FacilityType(LabeledEnum):
    FARM_STORAGE = "Farm Storage"
    WAREHOUSE = "Warehouse"
    SILO = "Silo"
    COLD_STORAGE = "Cold Storage"
    PROCESSING_PLANT = "Processing Plant"
    RETAIL_STORE = "Retail Store"

    @property
    def is_temperature_controlled(self) -> bool:
        return self in (FacilityType.COLD_STORAGE, FacilityType.PROCESSING_PLANT)

    @property
    def is_commercial(self) -> bool:
        return self in (FacilityType.WAREHOUSE, FacilityType.PROCESSING_PLANT, FacilityType.RETAIL_STORE)


class PackagingCondition(ScoredEnum):
    EXCELLENT = ("Excellent", 4)
    GOOD = ("Good", 3)
    FAIR = ("Fair", 2)
    POOR = ("Poor", 1)


class InventoryStatus(LabeledEnum):
    AVAILABLE = "Available"
    RESERVED = "Reserved"
    IN_TRANSIT = "In Transit"
    SOLD = "Sold"
    DAMAGED = "Damaged"
    EXPIRED = "Expired"
    DISPOSED = "Disposed"

    @property
    def is_sellable(self) -> bool:
        return self in (InventoryStatus.AVAILABLE, InventoryStatus.RESERVED)

    @property
    def is_active(self) -> bool:
        return self not in (InventoryStatus.SOLD, InventoryStatus.DISPOSED)

    @property
    def requires_action(self) -> bool:
        return self in (InventoryStatus.DAMAGED, InventoryStatus.EXPIRED)


class PestStatus(ScoredEnum):
    PEST_FREE = ("Pest Free", 4)
    MINOR_INFESTATION = ("Minor Infestation", 2)
    MAJOR_INFESTATION = ("Major Infestation", 1)


class CompetitionLevel(LabeledEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class StrategicImportance(ScoredEnum):
    LOW = ("Low", 1)
    MEDIUM = ("Medium", 2)
    HIGH = ("High", 3)
    CRITICAL = ("Critical", 4)


class InventoryAlert(LabeledEnum):
    EXPIRING_SOON = "Expiring Soon"
    LOW_STOCK = "Low Stock"
    HIGH_LOSS = "High Loss"
    PEST_DETECTED = "Pest Detected"
    QUALITY_DEGRADING = "Quality Degrading"
    OVERSTOCK = "Overstock"
    PRICE_DROP = "Price Drop"


# ─── Supply chain ───────────────────────────────────────────────────────────


class SupplyChainStage(LabeledEnum):
    HARVEST = "Harvest"
    COLLECTION = "Collection"
    STORAGE = "Storage"
    PROCESSING = "Processing"
    PACKAGING = "Packaging"
    TRANSPORT = "Transport"
    DISTRIBUTION = "Distribution"
    RETAIL = "Retail"

    @property
    def order(self) -> int:
        return list(SupplyChainStage).index(self) + 1

    def next_stage(self) -> SupplyChainStage | None:
        stages = list(SupplyChainStage)
        position = stages.index(self)
        return stages[position + 1] if position + 1 < len(stages) else None

    def previous_stage(self) -> SupplyChainStage | None:
        stages = list(SupplyChainStage)
        position = stages.index(self)
        return stages[position - 1] if position > 0 else None


class QualityStatus(ScoredEnum):
    EXCELLENT = ("Excellent", 5)
    GOOD = ("Good", 4)
    FAIR = ("Fair", 3)
    POOR = ("Poor", 2)
    REJECTED = ("Rejected", 1)

    @property
    def is_acceptable(self) -> bool:
        return self.score >= 3


class StageCategory(LabeledEnum):
    PRE_HARVEST = "Pre-Harvest"
    POST_HARVEST = "Post-Harvest"
    PROCESSING_PHASE = "Processing Phase"
    DISTRIBUTION_PHASE = "Distribution Phase"

    @classmethod
    def for_stage(cls, stage: SupplyChainStage | None) -> StageCategory:
        if stage in (SupplyChainStage.STORAGE, SupplyChainStage.PROCESSING, SupplyChainStage.PACKAGING):
            return cls.PROCESSING_PHASE
        if stage in (SupplyChainStage.TRANSPORT, SupplyChainStage.DISTRIBUTION, SupplyChainStage.RETAIL):
            return cls.DISTRIBUTION_PHASE
        return cls.POST_HARVEST


# ─── Market ─────────────────────────────────────────────────────────────────


class TransactionStatus(LabeledEnum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    DELIVERED = "Delivered"
    PAID = "Paid"
    CANCELLED = "Cancelled"
    DISPUTED = "Disputed"


class PaymentMethod(LabeledEnum):
    CASH = "Cash"
    BANK_TRANSFER = "Bank Transfer"
    MOBILE_MONEY = "Mobile Money"
    CHECK = "Check"
    CREDIT = "Credit"

    @property
    def is_immediate(self) -> bool:
        return self in (PaymentMethod.CASH, PaymentMethod.MOBILE_MONEY)

    @property
    def requires_verification(self) -> bool:
        return self in (PaymentMethod.BANK_TRANSFER, PaymentMethod.CHECK)


class TransportResponsibility(LabeledEnum):
    FARMER = "Farmer"
    BUYER = "Buyer"
    SHARED = "Shared"
    THIRD_PARTY = "Third Party"


class TransactionType(LabeledEnum):
    SPOT = "Spot Sale"
    CONTRACT = "Contract Sale"
    AUCTION = "Auction"
    COOPERATIVE = "Cooperative Sale"


class RatingLevel(ScoredEnum):
    VERY_POOR = ("Very Poor", 1)
    POOR = ("Poor", 2)
    FAIR = ("Fair", 3)
    GOOD = ("Good", 4)
    EXCELLENT = ("Excellent", 5)

    @classmethod
    def from_rating(cls, rating: int | None) -> RatingLevel:
        return cls.from_score(rating) or cls.FAIR


class BuyerType(LabeledEnum):
    WHOLESALER = "Wholesaler"
    RETAILER = "Retailer"
    PROCESSOR = "Processor"
    EXPORTER = "Exporter"
    COOPERATIVE = "Cooperative"
    GOVERNMENT = "Government"


class CreditRating(ScoredEnum):
    A_PLUS = ("A+", 5)
    A = ("A", 4)
    B_PLUS = ("B+", 3)
    B = ("B", 2)
    C = ("C", 1)


class MarketType(LabeledEnum):
    WHOLESALE = "Wholesale"
    RETAIL = "Retail"
    FARM_GATE = "Farm Gate"
    EXPORT = "Export"
    COMMODITY_EXCHANGE = "Commodity Exchange"


class DemandLevel(LabeledEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class SupplyLevel(LabeledEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXCESS = "Excess"


class PriceTrend(LabeledEnum):
    INCREASING = "Increasing"
    STABLE = "Stable"
    DECREASING = "Decreasing"


# ─── Environment ────────────────────────────────────────────────────────────


class RiskLevel(ScoredEnum):
    LOW = ("Low Risk", 1)
    MEDIUM = ("Medium Risk", 2)
    HIGH = ("High Risk", 3)
    CRITICAL = ("Critical Risk", 4)

    @property
    def is_high_risk(self) -> bool:
        return self in (RiskLevel.HIGH, RiskLevel.CRITICAL)

    @property
    def requires_action(self) -> bool:
        return self.score >= RiskLevel.MEDIUM.score


class DataSource(LabeledEnum):
    SATELLITE = "Satellite"
    GROUND_STATION = "Ground Station"
    SURVEY = "Survey"
    REMOTE_SENSING = "Remote Sensing"
    AUTOMATED_SENSORS = "Automated Sensors"
    MANUAL_COLLECTION = "Manual Collection"

    @property
    def is_automated(self) -> bool:
        return self in (DataSource.SATELLITE, DataSource.AUTOMATED_SENSORS, DataSource.REMOTE_SENSING)

    @property
    def is_manual(self) -> bool:
        return self in (DataSource.SURVEY, DataSource.MANUAL_COLLECTION)


class MonitoringFrequency(LabeledEnum):
    DAILY = ("Daily", 1)
    WEEKLY = ("Weekly", 7)
    MONTHLY = ("Monthly", 30)
    QUARTERLY = ("Quarterly", 90)
    ANNUALLY = ("Annually", 365)
    ON_DEMAND = ("On Demand", -1)

    def __init__(self, label, days):
        super().__init__(label)
        self.days = days


class ClimateEvent(LabeledEnum):
    DROUGHT = "Drought"
    FLOOD = "Flood"
    EXTREME_HEAT = "Extreme Heat"
    COLD_WAVE = "Cold Wave"
    HAIL = "Hail"
    STRONG_WINDS = "Strong Winds"
    PEST_OUTBREAK = "Pest Outbreak"
    DISEASE_OUTBREAK = "Disease Outbreak"


class EventIntensity(ScoredEnum):
    MILD = ("Mild", 1)
    MODERATE = ("Moderate", 2)
    SEVERE = ("Severe", 3)
    EXTREME = ("Extreme", 4)


class WarningEffectiveness(ScoredEnum):
    NONE = ("None", 0)
    POOR = ("Poor", 1)
    FAIR = ("Fair", 2)
    GOOD = ("Good", 3)
    EXCELLENT = ("Excellent", 4)


class ResponseEffectiveness(ScoredEnum):
    POOR = ("Poor", 1)
    FAIR = ("Fair", 2)
    GOOD = ("Good", 3)
    EXCELLENT = ("Excellent", 4)


class ImpactSeverity(ScoredEnum):
    LOW = ("Low", 1)
    MODERATE = ("Moderate", 2)
    HIGH = ("High", 3)
    CATASTROPHIC = ("Catastrophic", 4)


class SoilTexture(LabeledEnum):
    CLAY = "Clay"
    SANDY = "Sandy"
    LOAMY = "Loamy"
    SILTY = "Silty"
    CLAY_LOAM = "Clay Loam"
    SANDY_LOAM = "Sandy Loam"
    SILT_LOAM = "Silt Loam"


class PhBand(LabeledEnum):
    VERY_ACIDIC = "Very Acidic"
    ACIDIC = "Acidic"
    SLIGHTLY_ACIDIC = "Slightly Acidic"
    NEUTRAL = "Neutral"
    SLIGHTLY_ALKALINE = "Slightly Alkaline"
    ALKALINE = "Alkaline"
    VERY_ALKALINE = "Very Alkaline"


class NutrientLevel(LabeledEnum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class SoilCondition(LabeledEnum):
    GOOD = ("Good", "Soil conditions are optimal for most crops")
    MODERATE = ("Moderate", "Soil conditions are acceptable but could be improved")
    BAD = ("Bad", "Soil conditions need significant improvement")

    def __init__(self, label, description):
        super().__init__(label)
        self.description = description


class WeatherCondition(LabeledEnum):
    SUNNY = "Sunny"
    PARTLY_CLOUDY = "Partly Cloudy"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    STORMY = "Stormy"
    FOGGY = "Foggy"
    WINDY = "Windy"


class TemperatureRange(LabeledEnum):
    FREEZING = "Freezing"
    COLD = "Cold"
    COOL = "Cool"
    MILD = "Mild"
    WARM = "Warm"
    HOT = "Hot"
    VERY_HOT = "Very Hot"


# ─── Food security ──────────────────────────────────────────────────────────


class AlertCategory(LabeledEnum):
    PRODUCTION = "Production"
    WEATHER = "Weather"
    MARKET = "Market"
    DISEASE = "Disease"
    POLICY = "Policy"
    INFRASTRUCTURE = "Infrastructure"

    @property
    def is_environmental(self) -> bool:
        return self in (AlertCategory.WEATHER, AlertCategory.DISEASE)

    @property
    def is_economic(self) -> bool:
        return self in (AlertCategory.MARKET, AlertCategory.POLICY)

    @property
    def is_operational(self) -> bool:
        return self in (AlertCategory.PRODUCTION, AlertCategory.INFRASTRUCTURE)


class AlertLevel(LabeledEnum):
    INFO = ("Information", 1, "#17a2b8")
    LOW = ("Low", 2, "#28a745")
    MEDIUM = ("Medium", 3, "#ffc107")
    HIGH = ("High", 4, "#fd7e14")
    CRITICAL = ("Critical", 5, "#dc3545")

    def __init__(self, label, priority, color_code):
        super().__init__(label)
        self.priority = priority
        self.color_code = color_code

    @classmethod
    def from_severity_score(cls, score: int) -> AlertLevel:
        if score <= 2:
            return cls.INFO
        if score <= 4:
            return cls.LOW
        if score <= 6:
            return cls.MEDIUM
        if score <= 8:
            return cls.HIGH
        return cls.CRITICAL


class SourceReliability(ScoredEnum):
    VERIFIED = ("Verified", 3)
    UNVERIFIED = ("Unverified", 2)
    PRELIMINARY = ("Preliminary", 1)


class ResolutionStatus(LabeledEnum):
    UNRESOLVED = "Unresolved"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class UrgencyLevel(ScoredEnum):
    ROUTINE = ("Routine", 1)
    MODERATE = ("Moderate", 2)
    URGENT = ("Urgent", 3)
    EMERGENCY = ("Emergency", 4)


# ─── Predictions and recommendations ────────────────────────────────────────


class PredictionType(LabeledEnum):
    YIELD = "Yield Prediction"
    TOTAL_PRODUCTION = "Total Production"
    PLANTED_AREA = "Planted Area"
    HARVEST_PERIOD = "Harvest Period"


class AccuracyLevel(LabeledEnum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class ResourceType(LabeledEnum):
    FERTILIZER = "Fertilizer"
    WATER = "Water"
    SEEDS = "Seeds"
    PESTICIDE = "Pesticide"
    EQUIPMENT = "Equipment"
    LABOR = "Labor"
    FINANCING = "Financing"


class RecommendationCategory(LabeledEnum):
    OPTIMIZATION = "Optimization"
    PROBLEM_SOLVING = "Problem Solving"
    PREVENTIVE = "Preventive"
    SEASONAL = "Seasonal"
    EMERGENCY = "Emergency"


class PriorityLevel(ScoredEnum):
    LOW = ("Low", 1)
    MEDIUM = ("Medium", 2)
    HIGH = ("High", 3)
    URGENT = ("Urgent", 4)


class ImplementationDifficulty(ScoredEnum):
    EASY = ("Easy", 1)
    MODERATE = ("Moderate", 2)
    DIFFICULT = ("Difficult", 3)
    EXPERT_REQUIRED = ("Expert Required", 4)


class RecommendationStatus(LabeledEnum):
    ACTIVE = "Active"
    IMPLEMENTED = "Implemented"
    EXPIRED = "Expired"
    REJECTED = "Rejected"
    SUPERSEDED = "Superseded"


class EffectivenessRating(ScoredEnum):
    VERY_POOR = ("Very Poor", 1)
    POOR = ("Poor", 2)
    FAIR = ("Fair", 3)
    GOOD = ("Good", 4)
    EXCELLENT = ("Excellent", 5)

    @property
    def is_positive(self) -> bool:
        return self.score >= 3


class SustainabilityLevel(LabeledEnum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @property
    def is_sustainable(self) -> bool:
        return self in (SustainabilityLevel.HIGH, SustainabilityLevel.VERY_HIGH)


class AdvisoryType(LabeledEnum):
    IRRIGATION = "Irrigation"
    FERTILIZATION = "Fertilization"
    PEST_CONTROL = "Pest Control"
    DISEASE_MANAGEMENT = "Disease Management"
    PLANTING = "Planting"
    HARVESTING = "Harvesting"
    SOIL_MANAGEMENT = "Soil Management"
    CROP_ROTATION = "Crop Rotation"
    WEATHER_ADVISORY = "Weather Advisory"
    MARKET_ADVISORY = "Market Advisory"
    STORAGE = "Storage"
    EQUIPMENT = "Equipment"
    FINANCIAL = "Financial"
    SUSTAINABILITY = "Sustainability"
    GENERAL = "General"


class AdvisoryPriority(ScoredEnum):
    LOW = ("Low", 1)
    MEDIUM = ("Medium", 2)
    HIGH = ("High", 3)
    URGENT = ("Urgent", 4)


class IrrigationAlertLevel(LabeledEnum):
    LOW = ("Low", "No immediate action needed")
    MODERATE = ("Moderate", "Monitor soil moisture closely")
    HIGH = ("High", "Irrigate within the next 24 hours")
    CRITICAL = ("Critical", "Irrigate immediately to prevent crop damage")

    def __init__(self, label, description):
        super().__init__(label)
        self.description = description


# ─── Farm operations ────────────────────────────────────────────────────────


class CropType(LabeledEnum):
    CEREALS = "Cereals"
    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"
    LEGUMES = "Legumes"
    TUBERS = "Tubers"
    CASH_CROPS = "Cash Crops"


class MarketDemand(LabeledEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ProductionStatus(LabeledEnum):
    PLANNED = "Planned"
    PLANTED = "Planted"
    GROWING = "Growing"
    HARVESTED = "Harvested"
    SOLD = "Sold"


class ProductionMethod(LabeledEnum):
    ORGANIC = "Organic"
    CONVENTIONAL = "Conventional"
    INTEGRATED = "Integrated"


class FertilizerType(LabeledEnum):
    ORGANIC = "Organic"
    NPK = "NPK"
    NITROGEN = "Nitrogen"
    PHOSPHATE = "Phosphate"
    POTASH = "Potash"
    MICRONUTRIENTS = "Micronutrients"


class FertilizerUnit(LabeledEnum):
    KG = ("Kilograms", "1")
    TONNES = ("Tonnes", "1000")
    LITERS = ("Liters", "1.2")
    BAGS = ("Bags", "50")

    def __init__(self, label, kg_factor):
        super().__init__(label)
        self.kg_factor = kg_factor


class ApplicationMethod(LabeledEnum):
    BROADCAST = "Broadcast"
    BAND = "Band Application"
    FOLIAR = "Foliar Spray"
    FERTIGATION = "Fertigation"
    SPOT = "Spot Application"


class ApplicationStage(LabeledEnum):
    PRE_PLANTING = "Pre-Planting"
    PLANTING = "Planting"
    VEGETATIVE = "Vegetative"
    FLOWERING = "Flowering"
    FRUITING = "Fruiting"


class IrrigationMethod(LabeledEnum):
    SPRINKLER = "Sprinkler"
    DRIP = "Drip"
    FLOOD = "Flood"
    FURROW = "Furrow"
    MANUAL = "Manual"


class WaterSource(LabeledEnum):
    WELL = "Well"
    RIVER = "River"
    LAKE = "Lake"
    RAINWATER = "Rainwater"
    MUNICIPAL = "Municipal"


class EfficiencyLevel(LabeledEnum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class IrrigationSystem(LabeledEnum):
    RAIN_FED = "Rain-fed"
    DRIP = "Drip"
    SPRINKLER = "Sprinkler"
    FLOOD = "Flood"
    FURROW = "Furrow"


class Topography(LabeledEnum):
    FLAT = "Flat"
    GENTLE_SLOPE = "Gentle Slope"
    STEEP_SLOPE = "Steep Slope"
    HILLY = "Hilly"
    VALLEY = "Valley"


class RoadAccessQuality(LabeledEnum):
    POOR = "Poor"
    MODERATE = "Moderate"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class ExperienceLevel(LabeledEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


# ─── Policy ─────────────────────────────────────────────────────────────────


class PolicyType(LabeledEnum):
    SUBSIDY = "Subsidy"
    REGULATION = "Regulation"
    INCENTIVE = "Incentive"
    TAX_POLICY = "Tax Policy"
    TRADE_POLICY = "Trade Policy"
    LAND_POLICY = "Land Policy"
    CREDIT_PROGRAM = "Credit Program"
    INSURANCE_SCHEME = "Insurance Scheme"
    EXTENSION_SERVICE = "Extension Service"

    @property
    def is_financial(self) -> bool:
        return self in (
            PolicyType.SUBSIDY,
            PolicyType.INCENTIVE,
            PolicyType.CREDIT_PROGRAM,
            PolicyType.INSURANCE_SCHEME,
        )

    @property
    def is_regulatory(self) -> bool:
        return self in (
            PolicyType.REGULATION,
            PolicyType.TAX_POLICY,
            PolicyType.TRADE_POLICY,
            PolicyType.LAND_POLICY,
        )


class PolicyCategory(LabeledEnum):
    PRODUCTION = "Production"
    MARKETING = "Marketing"
    INFRASTRUCTURE = "Infrastructure"
    RESEARCH = "Research"
    SUSTAINABILITY = "Sustainability"
    FOOD_SECURITY = "Food Security"


class GeographicScope(LabeledEnum):
    NATIONAL = "National"
    PROVINCIAL = "Provincial"
    DISTRICT = "District"
    SECTOR = "Sector"
    CELL = "Cell"


class PolicyStatus(LabeledEnum):
    DRAFT = "Draft"
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"
    CANCELLED = "Cancelled"
    UNDER_REVIEW = "Under Review"


class PolicyEffectiveness(LabeledEnum):
    HIGHLY_EFFECTIVE = "Highly Effective"
    EFFECTIVE = "Effective"
    MODERATELY_EFFECTIVE = "Moderately Effective"
    SLIGHTLY_EFFECTIVE = "Slightly Effective"
    INEFFECTIVE = "Ineffective"
    NOT_ASSESSED = "Not Assessed"
