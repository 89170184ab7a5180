"""
AgriModel Database Models

21 tables for the smart-agriculture data layer.
References between records are plain string ids (farm_id, crop_id, ...);
nothing here enforces referential integrity.

Every table carries a string primary key `id` (entity prefix + timestamp
digits + random suffix), `created_at` and `updated_at`. Tables with a
human-facing business code name it in `__code_attr__`; columns owned
entirely by the lifecycle hooks are listed in `__read_only__`.

Tables:
  Farm operations (1-7):
  1. farmers                  - Farmer profiles
  2. farms                    - Farm plots and infrastructure
  3. crops                    - Crop catalog and agronomic ranges
  4. crop_productions         - One planting cycle of a crop on a farm
  5. fertilizer_usages        - Fertilizer application log
  6. irrigation_data          - Irrigation event log
  7. soil_data                - Soil sample measurements

  Market (8-13):
  8. buyers                   - Produce buyers
  9. market_prices            - Observed market prices
  10. transactions            - Farmer to buyer sales
  11. inventories             - Stored produce lots
  12. supply_chain_stages     - Stage records along the supply chain

  Environment and policy (13-17):
  13. environmental_data      - Environmental monitoring observations
  14. climate_impacts         - Climate events and their losses
  15. weather_data            - Weather station readings
  16. policy_data             - Agricultural policies and programs
  17. food_security_alerts    - Food-security alerts and their response

  Predictions and recommendations (18-21):
  18. production_predictions  - Model outputs for yield/production
  19. resource_recommendations - Resource recommendations per farm
  20. irrigation_predictions  - Predicted water needs and stress
  21. ai_recommendations      - Advisory messages for farmers
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)

from db import enums
from db.session import Base


def _enum(enum_cls):
    """Persist members by NAME; labels are never stored."""
    return Enum(enum_cls, native_enum=False, length=40)


# ─── 1. Farmers ─────────────────────────────────────────────────────────────


class Farmer(Base):
    __tablename__ = "farmers"

    id = Column(String(32), primary_key=True)
    user_id = Column(String(32), nullable=False)
    farmer_code = Column(String(50), unique=True)
    cooperative_name = Column(String(200))
    total_land_size = Column(Numeric(12, 2))
    location = Column(String(255))
    latitude = Column(Numeric(10, 6))
    longitude = Column(Numeric(10, 6))
    province = Column(String(100))
    district = Column(String(100))
    sector = Column(String(100))
    experience_level = Column(_enum(enums.ExperienceLevel), default=enums.ExperienceLevel.BEGINNER)
    certification_level = Column(String(100))
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_farmers_user", "user_id"),
        CheckConstraint("total_land_size IS NULL OR total_land_size >= 0", name="ck_farmer_land_positive"),
    )


# ─── 2. Farms ───────────────────────────────────────────────────────────────


class Farm(Base):
    __tablename__ = "farms"

    id = Column(String(32), primary_key=True)
    farmer_id = Column(String(32), nullable=False)
    farm_name = Column(String(100), nullable=False)
    farm_code = Column(String(50), unique=True)
    farm_size = Column(Numeric(12, 2), nullable=False)
    soil_type = Column(String(50))
    latitude = Column(Numeric(10, 6))
    longitude = Column(Numeric(10, 6))
    altitude = Column(Numeric(8, 2))
    irrigation_system = Column(_enum(enums.IrrigationSystem), default=enums.IrrigationSystem.RAIN_FED)
    topography = Column(_enum(enums.Topography))
    water_source = Column(String(100))
    electricity_available = Column(Boolean, default=False)
    road_access_quality = Column(_enum(enums.RoadAccessQuality), default=enums.RoadAccessQuality.MODERATE)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_farms_farmer", "farmer_id"),
        CheckConstraint("farm_size > 0", name="ck_farm_size_positive"),
    )


# ─── 3. Crops ───────────────────────────────────────────────────────────────


class Crop(Base):
    __tablename__ = "crops"

    id = Column(String(32), primary_key=True)
    crop_name = Column(String(100), nullable=False)
    crop_type = Column(_enum(enums.CropType), nullable=False)
    scientific_name = Column(String(150))
    variety = Column(String(100))
    growing_period_days = Column(Integer)
    planting_season = Column(String(100))
    harvest_season = Column(String(100))
    water_requirement = Column(Numeric(10, 2))
    soil_ph_min = Column(Numeric(4, 2))
    soil_ph_max = Column(Numeric(4, 2))
    temperature_min = Column(Numeric(5, 2))
    temperature_max = Column(Numeric(5, 2))
    rainfall_requirement = Column(Numeric(10, 2))
    market_demand_level = Column(_enum(enums.MarketDemand), default=enums.MarketDemand.MEDIUM)
    storage_life_days = Column(Integer)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("growing_period_days IS NULL OR growing_period_days > 0", name="ck_crop_growing_period"),
        CheckConstraint("soil_ph_min IS NULL OR (soil_ph_min >= 0 AND soil_ph_min <= 14)", name="ck_crop_ph_min"),
        CheckConstraint("soil_ph_max IS NULL OR (soil_ph_max >= 0 AND soil_ph_max <= 14)", name="ck_crop_ph_max"),
    )


# ─── 4. Crop productions ────────────────────────────────────────────────────


class CropProduction(Base):
    __tablename__ = "crop_productions"

    id = Column(String(32), primary_key=True)
    farm_id = Column(String(32), nullable=False)
    crop_id = Column(String(32), nullable=False)
    production_code = Column(String(50), unique=True)
    planting_date = Column(Date, nullable=False)
    expected_harvest_date = Column(Date)
    actual_harvest_date = Column(Date)
    area_planted = Column(Numeric(12, 2), nullable=False)
    expected_yield = Column(Numeric(12, 2))
    actual_yield = Column(Numeric(12, 2))
    total_production = Column(Numeric(14, 2))
    estimated_price = Column(Numeric(14, 2))
    price_per_kg = Column(Numeric(14, 2))
    production_status = Column(
        _enum(enums.ProductionStatus), nullable=False, default=enums.ProductionStatus.PLANNED
    )
    season = Column(_enum(enums.Season), nullable=False)
    year = Column(Integer, nullable=False)
    production_method = Column(_enum(enums.ProductionMethod), default=enums.ProductionMethod.CONVENTIONAL)
    certification = Column(String(100))
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_crop_productions_farm", "farm_id"),
        Index("ix_crop_productions_crop", "crop_id"),
        CheckConstraint("area_planted > 0", name="ck_production_area_positive"),
    )


# ─── 5. Fertilizer usages ───────────────────────────────────────────────────


class FertilizerUsage(Base):
    __tablename__ = "fertilizer_usages"

    id = Column(String(32), primary_key=True)
    crop_production_id = Column(String(32), nullable=False)
    fertilizer_type = Column(_enum(enums.FertilizerType), nullable=False)
    fertilizer_name = Column(String(100), nullable=False)
    brand = Column(String(100))
    composition = Column(String(100))
    quantity = Column(Numeric(12, 2), nullable=False)
    unit = Column(_enum(enums.FertilizerUnit), nullable=False, default=enums.FertilizerUnit.KG)
    application_date = Column(Date)
    application_method = Column(_enum(enums.ApplicationMethod))
    application_stage = Column(_enum(enums.ApplicationStage))
    cost_per_unit = Column(Numeric(14, 2))
    total_cost = Column(Numeric(14, 2))
    supplier = Column(String(150))
    batch_number = Column(String(50))
    expiry_date = Column(Date)
    effectiveness_rating = Column(Integer)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_fertilizer_usages_production", "crop_production_id"),
        CheckConstraint("quantity > 0", name="ck_fertilizer_quantity_positive"),
        CheckConstraint(
            "effectiveness_rating IS NULL OR (effectiveness_rating >= 1 AND effectiveness_rating <= 5)",
            name="ck_fertilizer_effectiveness_range",
        ),
    )


# ─── 6. Irrigation data ─────────────────────────────────────────────────────


class IrrigationData(Base):
    __tablename__ = "irrigation_data"

    id = Column(String(32), primary_key=True)
    farm_id = Column(String(32), nullable=False)
    crop_production_id = Column(String(32))
    irrigation_date = Column(DateTime, nullable=False)
    water_amount = Column(Numeric(12, 2), nullable=False)
    irrigation_method = Column(_enum(enums.IrrigationMethod), nullable=False)
    duration_minutes = Column(Integer)
    water_source = Column(_enum(enums.WaterSource))
    water_cost = Column(Numeric(14, 4))
    total_cost = Column(Numeric(14, 2))
    soil_moisture_before = Column(Numeric(5, 2))
    soil_moisture_after = Column(Numeric(5, 2))
    fertilizer_applied = Column(Boolean, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_irrigation_data_farm", "farm_id"),
        CheckConstraint("water_amount > 0", name="ck_irrigation_water_positive"),
        CheckConstraint(
            "soil_moisture_before IS NULL OR (soil_moisture_before >= 0 AND soil_moisture_before <= 100)",
            name="ck_irrigation_moisture_before_range",
        ),
        CheckConstraint(
            "soil_moisture_after IS NULL OR (soil_moisture_after >= 0 AND soil_moisture_after <= 100)",
            name="ck_irrigation_moisture_after_range",
        ),
    )


# ─── 7. Soil data ───────────────────────────────────────────────────────────


class SoilData(Base):
    __tablename__ = "soil_data"

    id = Column(String(32), primary_key=True)
    farm_id = Column(String(32), nullable=False)
    sample_code = Column(String(50), unique=True)
    ph_level = Column(Numeric(4, 2))
    nitrogen_content = Column(Numeric(10, 2))
    phosphorus_content = Column(Numeric(10, 2))
    potassium_content = Column(Numeric(10, 2))
    organic_matter = Column(Numeric(5, 2))
    moisture_content = Column(Numeric(5, 2))
    soil_texture = Column(_enum(enums.SoilTexture))
    bulk_density = Column(Numeric(5, 2))
    porosity = Column(Numeric(5, 2))
    electrical_conductivity = Column(Numeric(6, 2))
    cation_exchange_capacity = Column(Numeric(6, 2))
    measurement_date = Column(Date, nullable=False)
    testing_method = Column(String(100))
    laboratory_name = Column(String(150))
    depth_cm = Column(Integer, default=30)
    next_test_due = Column(Date)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_soil_data_farm", "farm_id"),
        CheckConstraint("ph_level IS NULL OR (ph_level >= 0 AND ph_level <= 14)", name="ck_soil_ph_range"),
    )


# ─── 8. Buyers ──────────────────────────────────────────────────────────────


class Buyer(Base):
    __tablename__ = "buyers"

    id = Column(String(32), primary_key=True)
    user_id = Column(String(32), nullable=False)
    buyer_code = Column(String(50), unique=True)
    company_name = Column(String(200), nullable=False)
    buyer_type = Column(_enum(enums.BuyerType), nullable=False)
    location = Column(String(255))
    contact_person = Column(String(150))
    primary_products = Column(JSON)
    credit_limit = Column(Numeric(14, 2), default=0)
    credit_rating = Column(_enum(enums.CreditRating))
    payment_terms = Column(String(100))
    storage_capacity = Column(Numeric(12, 2))
    transport_capacity = Column(Numeric(12, 2))
    geographical_coverage = Column(String(255))
    established_year = Column(Integer)
    annual_volume = Column(Numeric(14, 2))
    rating = Column(Numeric(3, 2), default=5)
    verified = Column(Boolean, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "buyer_code"

    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 0 AND rating <= 5)", name="ck_buyer_rating_range"),
        CheckConstraint("credit_limit IS NULL OR credit_limit >= 0", name="ck_buyer_credit_limit_positive"),
    )


# ─── 9. Market prices ───────────────────────────────────────────────────────


class MarketPrice(Base):
    __tablename__ = "market_prices"

    id = Column(String(32), primary_key=True)
    crop_id = Column(String(32), nullable=False)
    market_name = Column(String(150), nullable=False)
    market_type = Column(_enum(enums.MarketType), nullable=False)
    location = Column(String(255))
    price_date = Column(Date, nullable=False)
    price_per_kg = Column(Numeric(14, 2), nullable=False)
    currency = Column(String(3), default="RWF")
    quality_grade = Column(String(20))
    demand_level = Column(_enum(enums.DemandLevel))
    supply_level = Column(_enum(enums.SupplyLevel))
    price_trend = Column(_enum(enums.PriceTrend), default=enums.PriceTrend.STABLE)
    seasonal_factor = Column(Numeric(6, 4))
    transport_cost = Column(Numeric(14, 2))
    storage_cost = Column(Numeric(14, 2))
    processing_cost = Column(Numeric(14, 2))
    data_source = Column(String(100))
    reliability_score = Column(Integer, default=5)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_market_prices_crop_date", "crop_id", "price_date"),
        CheckConstraint("price_per_kg > 0", name="ck_market_price_positive"),
        CheckConstraint(
            "reliability_score IS NULL OR (reliability_score >= 1 AND reliability_score <= 5)",
            name="ck_market_price_reliability_range",
        ),
    )


# ─── 10. Transactions ───────────────────────────────────────────────────────


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(32), primary_key=True)
    transaction_code = Column(String(50), unique=True)
    farmer_id = Column(String(32), nullable=False)
    buyer_id = Column(String(32), nullable=False)
    crop_id = Column(String(32), nullable=False)
    crop_production_id = Column(String(32))
    transaction_type = Column(_enum(enums.TransactionType), default=enums.TransactionType.SPOT)
    transaction_date = Column(DateTime)
    quantity = Column(Numeric(12, 2), nullable=False)
    unit = Column(String(20), default="KG")
    price_per_unit = Column(Numeric(14, 2), nullable=False)
    total_amount = Column(Numeric(16, 2))
    currency = Column(String(3), default="XAF")
    status = Column(_enum(enums.TransactionStatus), nullable=False, default=enums.TransactionStatus.PENDING)
    payment_method = Column(_enum(enums.PaymentMethod))
    payment_terms = Column(String(100))
    advance_payment = Column(Numeric(14, 2), default=0)
    delivery_date = Column(Date)
    delivery_location = Column(String(255))
    quality_grade = Column(String(20))
    transport_responsibility = Column(
        _enum(enums.TransportResponsibility), default=enums.TransportResponsibility.BUYER
    )
    transport_cost = Column(Numeric(14, 2))
    insurance_cost = Column(Numeric(14, 2))
    broker_involved = Column(Boolean, default=False)
    broker_commission = Column(Numeric(14, 2))
    government_tax = Column(Numeric(14, 2))
    net_amount_farmer = Column(Numeric(16, 2))
    payment_date = Column(DateTime)
    completion_date = Column(DateTime)
    rating_farmer = Column(Integer)
    rating_buyer = Column(Integer)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "transaction_code"

    __table_args__ = (
        Index("ix_transactions_farmer", "farmer_id"),
        Index("ix_transactions_buyer", "buyer_id"),
        CheckConstraint("quantity > 0", name="ck_transaction_quantity_positive"),
        CheckConstraint("price_per_unit > 0", name="ck_transaction_price_positive"),
        CheckConstraint(
            "rating_farmer IS NULL OR (rating_farmer >= 1 AND rating_farmer <= 5)",
            name="ck_transaction_rating_farmer_range",
        ),
        CheckConstraint(
            "rating_buyer IS NULL OR (rating_buyer >= 1 AND rating_buyer <= 5)",
            name="ck_transaction_rating_buyer_range",
        ),
    )


# ─── 11. Inventories ────────────────────────────────────────────────────────


class Inventory(Base):
    __tablename__ = "inventories"

    id = Column(String(32), primary_key=True)
    inventory_code = Column(String(50), unique=True)
    crop_id = Column(String(32), nullable=False)
    farmer_id = Column(String(32))
    buyer_id = Column(String(32))
    facility_type = Column(_enum(enums.FacilityType), nullable=False)
    storage_location = Column(String(255), nullable=False)
    facility_name = Column(String(150))
    storage_capacity = Column(Numeric(14, 2))
    current_quantity = Column(Numeric(14, 2), nullable=False)
    reserved_quantity = Column(Numeric(14, 2), default=0)
    available_quantity = Column(Numeric(14, 2))
    unit = Column(String(20), default="KG")
    quality_grade = Column(String(20))
    harvest_date = Column(Date)
    storage_date = Column(Date)
    expected_shelf_life_days = Column(Integer)
    expiry_date = Column(Date)
    packaging_condition = Column(_enum(enums.PackagingCondition), default=enums.PackagingCondition.GOOD)
    market_value_per_unit = Column(Numeric(14, 2))
    total_market_value = Column(Numeric(16, 2))
    purchase_price_per_unit = Column(Numeric(14, 2))
    storage_cost_per_unit = Column(Numeric(14, 2))
    status = Column(_enum(enums.InventoryStatus), nullable=False, default=enums.InventoryStatus.AVAILABLE)
    moisture_content = Column(Numeric(5, 2))
    pest_status = Column(_enum(enums.PestStatus), default=enums.PestStatus.PEST_FREE)
    quality_degradation_rate = Column(Numeric(6, 2))
    optimal_sale_period = Column(String(100))
    organic_certified = Column(Boolean, default=False)
    fair_trade_certified = Column(Boolean, default=False)
    local_sourcing = Column(Boolean, default=True)
    days_in_storage = Column(Integer)
    loss_percentage = Column(Numeric(5, 2), default=0)
    loss_value = Column(Numeric(14, 2))
    profit_margin = Column(Numeric(8, 2))
    next_inspection_date = Column(Date)
    reorder_level = Column(Numeric(14, 2))
    maximum_stock_level = Column(Numeric(14, 2))
    minimum_stock_level = Column(Numeric(14, 2))
    market_competition_level = Column(_enum(enums.CompetitionLevel), default=enums.CompetitionLevel.MEDIUM)
    strategic_importance = Column(_enum(enums.StrategicImportance), default=enums.StrategicImportance.MEDIUM)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "inventory_code"

    __table_args__ = (
        Index("ix_inventories_crop", "crop_id"),
        CheckConstraint("current_quantity >= 0", name="ck_inventory_current_positive"),
        CheckConstraint("reserved_quantity IS NULL OR reserved_quantity >= 0", name="ck_inventory_reserved_positive"),
        CheckConstraint(
            "loss_percentage IS NULL OR (loss_percentage >= 0 AND loss_percentage <= 100)",
            name="ck_inventory_loss_range",
        ),
    )


# ─── 12. Supply chain stages ────────────────────────────────────────────────


class SupplyChain(Base):
    __tablename__ = "supply_chain_stages"
    __read_only__ = ("loss_inferred",)

    id = Column(String(32), primary_key=True)
    tracking_code = Column(String(50), unique=True)
    crop_production_id = Column(String(32), nullable=False)
    transaction_id = Column(String(32))
    stage = Column(_enum(enums.SupplyChainStage), nullable=False)
    stage_order = Column(Integer)
    stage_start_date = Column(DateTime)
    stage_end_date = Column(DateTime)
    location = Column(String(255), nullable=False)
    facility_name = Column(String(150))
    quantity_in = Column(Numeric(14, 2))
    quantity_out = Column(Numeric(14, 2))
    unit = Column(String(20), default="KG")
    loss_quantity = Column(Numeric(14, 2), default=0)
    loss_percentage = Column(Numeric(5, 2), default=0)
    # loss_quantity was derived from quantity_in - quantity_out, not recorded
    loss_inferred = Column(Boolean, default=False, nullable=False)
    loss_reason = Column(String(255))
    quality_status = Column(_enum(enums.QualityStatus), default=enums.QualityStatus.GOOD)
    storage_conditions = Column(String(255))
    transport_method = Column(String(100))
    responsible_party = Column(String(150))
    cost_incurred = Column(Numeric(14, 2))
    handling_notes = Column(Text)
    compliance_certificates = Column(String(255))
    insurance_coverage = Column(Boolean, default=False)
    next_stage_location = Column(String(255))
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "tracking_code"

    __table_args__ = (
        Index("ix_supply_chain_production", "crop_production_id"),
        CheckConstraint("quantity_in IS NULL OR quantity_in >= 0", name="ck_supply_chain_in_positive"),
        CheckConstraint("quantity_out IS NULL OR quantity_out >= 0", name="ck_supply_chain_out_positive"),
        CheckConstraint(
            "loss_percentage IS NULL OR (loss_percentage >= 0 AND loss_percentage <= 100)",
            name="ck_supply_chain_loss_range",
        ),
    )


# ─── 13. Environmental data ─────────────────────────────────────────────────


class EnvironmentalData(Base):
    __tablename__ = "environmental_data"

    id = Column(String(32), primary_key=True)
    monitoring_code = Column(String(50), unique=True)
    region = Column(String(100), nullable=False)
    district = Column(String(100))
    sector = Column(String(100))
    latitude = Column(Numeric(10, 6))
    longitude = Column(Numeric(10, 6))
    record_date = Column(Date, nullable=False)
    data_source = Column(_enum(enums.DataSource))
    air_quality_index = Column(Numeric(6, 2))
    water_quality_index = Column(Numeric(6, 2))
    water_ph = Column(Numeric(4, 2))
    forest_coverage = Column(Numeric(5, 2))
    deforestation_rate = Column(Numeric(6, 2))
    carbon_emissions = Column(Numeric(14, 2))
    carbon_sequestration = Column(Numeric(14, 2))
    biodiversity_index = Column(Numeric(6, 2))
    species_count = Column(Integer)
    endangered_species_count = Column(Integer)
    soil_erosion_rate = Column(Numeric(6, 2))
    soil_organic_matter = Column(Numeric(5, 2))
    climate_resilience_score = Column(Numeric(5, 2))
    environmental_risk_level = Column(_enum(enums.RiskLevel), default=enums.RiskLevel.LOW)
    monitoring_frequency = Column(_enum(enums.MonitoringFrequency))
    next_monitoring_date = Column(Date)
    data_quality = Column(_enum(enums.DataQuality), default=enums.DataQuality.GOOD)
    validation_status = Column(_enum(enums.ValidationStatus), default=enums.ValidationStatus.PENDING)
    validated_by = Column(String(100))
    validation_date = Column(DateTime)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "monitoring_code"

    __table_args__ = (
        Index("ix_environmental_data_region_date", "region", "record_date"),
        CheckConstraint(
            "air_quality_index IS NULL OR (air_quality_index >= 0 AND air_quality_index <= 500)",
            name="ck_environmental_aqi_range",
        ),
        CheckConstraint(
            "water_quality_index IS NULL OR (water_quality_index >= 0 AND water_quality_index <= 100)",
            name="ck_environmental_wqi_range",
        ),
    )


# ─── 14. Climate impacts ────────────────────────────────────────────────────


class ClimateImpact(Base):
    __tablename__ = "climate_impacts"

    id = Column(String(32), primary_key=True)
    impact_code = Column(String(50), unique=True)
    crop_id = Column(String(32))
    region = Column(String(100), nullable=False)
    district = Column(String(100))
    year = Column(Integer, nullable=False)
    season = Column(_enum(enums.Season))
    climate_event = Column(_enum(enums.ClimateEvent), nullable=False)
    event_intensity = Column(_enum(enums.EventIntensity))
    event_start_date = Column(Date, nullable=False)
    event_end_date = Column(Date)
    event_duration_days = Column(Integer)
    affected_area = Column(Numeric(14, 2))
    affected_population = Column(Integer)
    yield_impact = Column(Numeric(6, 2))
    production_loss = Column(Numeric(14, 2))
    economic_loss = Column(Numeric(16, 2))
    early_warning_effectiveness = Column(
        _enum(enums.WarningEffectiveness), default=enums.WarningEffectiveness.NONE
    )
    response_effectiveness = Column(_enum(enums.ResponseEffectiveness), default=enums.ResponseEffectiveness.FAIR)
    report_date = Column(Date)
    reported_by = Column(String(100))
    verified = Column(Boolean, default=False)
    verification_date = Column(DateTime)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "impact_code"

    __table_args__ = (
        Index("ix_climate_impacts_region_year", "region", "year"),
        CheckConstraint("economic_loss IS NULL OR economic_loss >= 0", name="ck_climate_economic_loss_positive"),
    )


# ─── 15. Weather data ───────────────────────────────────────────────────────


class WeatherData(Base):
    __tablename__ = "weather_data"

    id = Column(String(32), primary_key=True)
    latitude = Column(Numeric(10, 6), nullable=False)
    longitude = Column(Numeric(10, 6), nullable=False)
    record_date = Column(DateTime, nullable=False)
    temperature = Column(Numeric(5, 2))
    temperature_min = Column(Numeric(5, 2))
    temperature_max = Column(Numeric(5, 2))
    humidity = Column(Numeric(5, 2))
    rainfall = Column(Numeric(8, 2))
    wind_speed = Column(Numeric(6, 2))
    wind_direction = Column(String(10))
    weather_condition = Column(_enum(enums.WeatherCondition))
    solar_radiation = Column(Numeric(8, 2))
    evapotranspiration = Column(Numeric(6, 2))
    atmospheric_pressure = Column(Numeric(7, 2))
    uv_index = Column(Numeric(4, 1))
    data_source = Column(String(100))
    station_id = Column(String(50))
    data_quality = Column(_enum(enums.DataQuality), default=enums.DataQuality.GOOD)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_weather_data_station_date", "station_id", "record_date"),
        CheckConstraint("humidity IS NULL OR (humidity >= 0 AND humidity <= 100)", name="ck_weather_humidity_range"),
        CheckConstraint("rainfall IS NULL OR rainfall >= 0", name="ck_weather_rainfall_positive"),
    )


# ─── 16. Policy data ────────────────────────────────────────────────────────


class PolicyData(Base):
    __tablename__ = "policy_data"

    id = Column(String(32), primary_key=True)
    policy_code = Column(String(50), unique=True)
    policy_name = Column(String(200), nullable=False)
    policy_type = Column(_enum(enums.PolicyType), nullable=False)
    policy_category = Column(_enum(enums.PolicyCategory))
    description = Column(Text)
    implementing_agency = Column(String(200))
    geographic_scope = Column(_enum(enums.GeographicScope))
    target_region = Column(String(100))
    target_crops = Column(JSON)
    effective_date = Column(Date, nullable=False)
    expiry_date = Column(Date)
    total_budget = Column(Numeric(16, 2))
    currency = Column(String(3), default="RWF")
    budget_allocated = Column(Numeric(16, 2))
    budget_utilized = Column(Numeric(16, 2))
    utilization_rate = Column(Numeric(5, 2))
    target_beneficiaries = Column(Integer)
    actual_beneficiaries = Column(Integer)
    effectiveness_score = Column(Numeric(5, 2))
    next_review_date = Column(Date)
    status = Column(_enum(enums.PolicyStatus), nullable=False, default=enums.PolicyStatus.DRAFT)
    youth_focus = Column(Boolean, default=False)
    gender_considerations = Column(Boolean, default=False)
    climate_smart = Column(Boolean, default=False)
    environmental_clearance = Column(Boolean, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "policy_code"

    __table_args__ = (
        Index("ix_policy_data_status", "status"),
        CheckConstraint(
            "effectiveness_score IS NULL OR (effectiveness_score >= 0 AND effectiveness_score <= 100)",
            name="ck_policy_effectiveness_range",
        ),
    )


# ─── 17. Food security alerts ───────────────────────────────────────────────


class FoodSecurityAlert(Base):
    __tablename__ = "food_security_alerts"

    id = Column(String(32), primary_key=True)
    alert_code = Column(String(50), unique=True)
    alert_title = Column(String(200), nullable=False)
    alert_category = Column(_enum(enums.AlertCategory), nullable=False)
    description = Column(Text)
    alert_level = Column(_enum(enums.AlertLevel), nullable=False)
    severity_score = Column(Integer)
    affected_region = Column(String(100), nullable=False)
    affected_districts = Column(JSON)
    affected_crops = Column(JSON)
    affected_population = Column(Integer)
    alert_date = Column(DateTime)
    event_start_date = Column(Date)
    event_end_date = Column(Date)
    expiry_date = Column(DateTime)
    source = Column(String(150))
    source_reliability = Column(_enum(enums.SourceReliability), default=enums.SourceReliability.UNVERIFIED)
    is_active = Column(Boolean, nullable=False, default=True)
    escalation_level = Column(Integer, nullable=False, default=1)
    response_required = Column(Boolean, default=False)
    response_deadline = Column(DateTime)
    recommended_actions = Column(Text)
    stakeholders_notified = Column(JSON)
    economic_impact = Column(Numeric(16, 2))
    social_impact = Column(Text)
    environmental_impact = Column(Text)
    mitigation_measures = Column(Text)
    follow_up_alerts = Column(JSON)
    resolution_status = Column(_enum(enums.ResolutionStatus), default=enums.ResolutionStatus.UNRESOLVED)
    resolution_date = Column(DateTime)
    media_coverage = Column(Boolean, default=False)
    international_attention = Column(Boolean, default=False)
    created_by = Column(String(100))
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "alert_code"

    __table_args__ = (
        Index("ix_food_security_alerts_region_active", "affected_region", "is_active"),
        CheckConstraint("severity_score IS NULL OR (severity_score >= 1 AND severity_score <= 10)", name="ck_alert_severity_range"),
        CheckConstraint("escalation_level >= 1 AND escalation_level <= 5", name="ck_alert_escalation_range"),
    )


# ─── 18. Production predictions ─────────────────────────────────────────────


class ProductionPrediction(Base):
    __tablename__ = "production_predictions"

    id = Column(String(32), primary_key=True)
    prediction_code = Column(String(50), unique=True)
    crop_production_id = Column(String(32))
    crop_id = Column(String(32), nullable=False)
    region = Column(String(100))
    district = Column(String(100))
    year = Column(Integer, nullable=False)
    season = Column(_enum(enums.Season))
    prediction_type = Column(_enum(enums.PredictionType), nullable=False)
    predicted_value = Column(Numeric(14, 2), nullable=False)
    unit = Column(String(20))
    confidence_level = Column(Numeric(5, 2))
    prediction_interval_min = Column(Numeric(14, 2))
    prediction_interval_max = Column(Numeric(14, 2))
    model_used = Column(String(100))
    model_version = Column(String(50))
    algorithm = Column(String(100))
    prediction_date = Column(DateTime)
    target_date = Column(Date)
    historical_accuracy = Column(Numeric(5, 2))
    update_frequency = Column(String(20), default="MONTHLY")
    last_updated = Column(DateTime)
    actual_value = Column(Numeric(14, 2))
    accuracy_achieved = Column(Numeric(5, 2))
    validation_status = Column(_enum(enums.ValidationStatus), default=enums.ValidationStatus.PENDING)
    validated_by = Column(String(100))
    validation_date = Column(DateTime)
    published = Column(Boolean, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "prediction_code"

    __table_args__ = (
        Index("ix_production_predictions_crop_year", "crop_id", "year"),
        CheckConstraint(
            "confidence_level IS NULL OR (confidence_level >= 0 AND confidence_level <= 100)",
            name="ck_prediction_confidence_range",
        ),
        CheckConstraint(
            "accuracy_achieved IS NULL OR (accuracy_achieved >= 0 AND accuracy_achieved <= 100)",
            name="ck_prediction_accuracy_range",
        ),
    )


# ─── 19. Resource recommendations ───────────────────────────────────────────


class ResourceRecommendation(Base):
    __tablename__ = "resource_recommendations"

    id = Column(String(32), primary_key=True)
    recommendation_code = Column(String(50), unique=True)
    farm_id = Column(String(32), nullable=False)
    crop_production_id = Column(String(32))
    resource_type = Column(_enum(enums.ResourceType), nullable=False)
    recommendation_category = Column(_enum(enums.RecommendationCategory))
    priority_level = Column(_enum(enums.PriorityLevel), default=enums.PriorityLevel.MEDIUM)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    recommended_action = Column(Text)
    recommended_quantity = Column(Numeric(12, 2))
    unit = Column(String(20))
    optimal_timing = Column(String(100))
    timing_start_date = Column(Date)
    timing_end_date = Column(Date)
    frequency = Column(String(50))
    estimated_cost = Column(Numeric(14, 2))
    currency = Column(String(3), default="RWF")
    expected_roi = Column(Numeric(8, 2))
    confidence_score = Column(Numeric(5, 2))
    sustainability_score = Column(Integer)
    implementation_difficulty = Column(
        _enum(enums.ImplementationDifficulty), default=enums.ImplementationDifficulty.MODERATE
    )
    generated_date = Column(DateTime)
    valid_until = Column(Date)
    status = Column(_enum(enums.RecommendationStatus), nullable=False, default=enums.RecommendationStatus.ACTIVE)
    implementation_date = Column(Date)
    implementation_notes = Column(Text)
    effectiveness_rating = Column(_enum(enums.EffectivenessRating))
    farmer_feedback = Column(Text)
    actual_cost = Column(Numeric(14, 2))
    follow_up_required = Column(Boolean, default=False)
    follow_up_date = Column(Date)
    created_by = Column(String(100), default="AI_SYSTEM")
    reviewed_by = Column(String(100))
    review_date = Column(DateTime)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __code_attr__ = "recommendation_code"

    __table_args__ = (
        Index("ix_resource_recommendations_farm_status", "farm_id", "status"),
        CheckConstraint(
            "confidence_score IS NULL OR (confidence_score >= 0 AND confidence_score <= 100)",
            name="ck_recommendation_confidence_range",
        ),
        CheckConstraint(
            "sustainability_score IS NULL OR (sustainability_score >= 1 AND sustainability_score <= 10)",
            name="ck_recommendation_sustainability_range",
        ),
    )


# ─── 20. Irrigation predictions ─────────────────────────────────────────────


class IrrigationPrediction(Base):
    __tablename__ = "irrigation_predictions"

    id = Column(String(32), primary_key=True)
    farm_id = Column(String(32), nullable=False)
    crop_production_id = Column(String(32))
    prediction_date = Column(DateTime)
    predicted_water_need = Column(Numeric(12, 2))
    predicted_irrigation_frequency = Column(Integer)
    water_stress_risk = Column(Numeric(5, 2))
    predicted_yield_impact = Column(Numeric(6, 2))
    optimal_irrigation_duration = Column(Integer)
    cost_estimation = Column(Numeric(14, 2))
    confidence_level = Column(Numeric(5, 2))
    soil_moisture_target = Column(Numeric(5, 2))
    alert_level = Column(_enum(enums.IrrigationAlertLevel))
    recommendations = Column(Text)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_irrigation_predictions_farm", "farm_id"),
        CheckConstraint(
            "water_stress_risk IS NULL OR (water_stress_risk >= 0 AND water_stress_risk <= 100)",
            name="ck_irrigation_prediction_stress_range",
        ),
    )


# ─── 21. AI recommendations ─────────────────────────────────────────────────


class AIRecommendation(Base):
    __tablename__ = "ai_recommendations"

    id = Column(String(32), primary_key=True)
    farmer_id = Column(String(32), nullable=False)
    farm_id = Column(String(32))
    crop_production_id = Column(String(32))
    recommendation_type = Column(_enum(enums.AdvisoryType), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    action_items = Column(Text)
    priority = Column(_enum(enums.AdvisoryPriority), nullable=False, default=enums.AdvisoryPriority.MEDIUM)
    confidence_score = Column(Numeric(4, 3))
    generated_by = Column(String(100))
    is_read = Column(Boolean, default=False)
    read_at = Column(DateTime)
    is_implemented = Column(Boolean, default=False)
    implementation_date = Column(DateTime)
    implementation_notes = Column(Text)
    effectiveness_rating = Column(Integer)
    valid_from = Column(DateTime)
    valid_until = Column(DateTime)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_ai_recommendations_farmer", "farmer_id", "is_read"),
        CheckConstraint(
            "confidence_score IS NULL OR (confidence_score >= 0 AND confidence_score <= 1)",
            name="ck_ai_recommendation_confidence_range",
        ),
        CheckConstraint(
            "effectiveness_rating IS NULL OR (effectiveness_rating >= 1 AND effectiveness_rating <= 5)",
            name="ck_ai_recommendation_effectiveness_range",
        ),
    )
