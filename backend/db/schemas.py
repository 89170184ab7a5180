"""
Field constraints checked before a record is created or changed.

One pydantic model per table. The write path validates the state a record
would have after the change (current values merged with the incoming
ones), so every violated constraint is reported in a single
RecordValidationError and the record is left untouched.

Derived fields are not listed; they are owned by the lifecycle hooks.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, ValidationError

from core.errors import RecordValidationError
from db import enums, models

Percent = Annotated[Decimal | None, Field(ge=0, le=100)]


class RecordSchema(BaseModel):
    model_config = {"extra": "ignore"}


class FarmerSchema(RecordSchema):
    user_id: str = Field(..., min_length=1, max_length=32)
    farmer_code: str | None = Field(default=None, max_length=50)
    cooperative_name: str | None = Field(default=None, max_length=200)
    total_land_size: Decimal | None = Field(default=None, ge=0)
    location: str | None = Field(default=None, max_length=255)
    latitude: Decimal | None = Field(default=None, ge=-90, le=90)
    longitude: Decimal | None = Field(default=None, ge=-180, le=180)
    province: str | None = Field(default=None, max_length=100)
    district: str | None = Field(default=None, max_length=100)
    sector: str | None = Field(default=None, max_length=100)
    experience_level: enums.ExperienceLevel | None = None


class FarmSchema(RecordSchema):
    farmer_id: str = Field(..., min_length=1, max_length=32)
    farm_name: str = Field(..., min_length=2, max_length=100)
    farm_code: str | None = Field(default=None, max_length=50)
    farm_size: Decimal = Field(..., gt=0)
    soil_type: str | None = Field(default=None, max_length=50)
    latitude: Decimal | None = Field(default=None, ge=-90, le=90)
    longitude: Decimal | None = Field(default=None, ge=-180, le=180)
    altitude: Decimal | None = None
    irrigation_system: enums.IrrigationSystem | None = None
    topography: enums.Topography | None = None
    road_access_quality: enums.RoadAccessQuality | None = None


class CropSchema(RecordSchema):
    crop_name: str = Field(..., min_length=2, max_length=100)
    crop_type: enums.CropType
    scientific_name: str | None = Field(default=None, max_length=150)
    variety: str | None = Field(default=None, max_length=100)
    growing_period_days: int | None = Field(default=None, gt=0)
    water_requirement: Decimal | None = Field(default=None, ge=0)
    soil_ph_min: Decimal | None = Field(default=None, ge=0, le=14)
    soil_ph_max: Decimal | None = Field(default=None, ge=0, le=14)
    temperature_min: Decimal | None = None
    temperature_max: Decimal | None = None
    rainfall_requirement: Decimal | None = Field(default=None, ge=0)
    market_demand_level: enums.MarketDemand | None = None
    storage_life_days: int | None = Field(default=None, ge=0)


class CropProductionSchema(RecordSchema):
    farm_id: str = Field(..., min_length=1, max_length=32)
    crop_id: str = Field(..., min_length=1, max_length=32)
    planting_date: date
    expected_harvest_date: date | None = None
    actual_harvest_date: date | None = None
    area_planted: Decimal = Field(..., gt=0)
    expected_yield: Decimal | None = Field(default=None, ge=0)
    actual_yield: Decimal | None = Field(default=None, ge=0)
    estimated_price: Decimal | None = Field(default=None, ge=0)
    price_per_kg: Decimal | None = Field(default=None, ge=0)
    production_status: enums.ProductionStatus | None = None
    season: enums.Season
    year: int = Field(..., ge=1900, le=2200)
    production_method: enums.ProductionMethod | None = None


class FertilizerUsageSchema(RecordSchema):
    crop_production_id: str = Field(..., min_length=1, max_length=32)
    fertilizer_type: enums.FertilizerType
    fertilizer_name: str = Field(..., min_length=1, max_length=100)
    composition: str | None = Field(default=None, max_length=100)
    quantity: Decimal = Field(..., gt=0)
    unit: enums.FertilizerUnit | None = None
    application_date: date | None = None
    application_method: enums.ApplicationMethod | None = None
    application_stage: enums.ApplicationStage | None = None
    cost_per_unit: Decimal | None = Field(default=None, ge=0)
    expiry_date: date | None = None
    effectiveness_rating: int | None = Field(default=None, ge=1, le=5)


class IrrigationDataSchema(RecordSchema):
    farm_id: str = Field(..., min_length=1, max_length=32)
    crop_production_id: str | None = Field(default=None, max_length=32)
    irrigation_date: datetime
    water_amount: Decimal = Field(..., gt=0)
    irrigation_method: enums.IrrigationMethod
    duration_minutes: int | None = Field(default=None, ge=0)
    water_source: enums.WaterSource | None = None
    water_cost: Decimal | None = Field(default=None, ge=0)
    soil_moisture_before: Percent = None
    soil_moisture_after: Percent = None


class SoilDataSchema(RecordSchema):
    farm_id: str = Field(..., min_length=1, max_length=32)
    sample_code: str | None = Field(default=None, max_length=50)
    ph_level: Decimal | None = Field(default=None, ge=0, le=14)
    nitrogen_content: Decimal | None = Field(default=None, ge=0)
    phosphorus_content: Decimal | None = Field(default=None, ge=0)
    potassium_content: Decimal | None = Field(default=None, ge=0)
    organic_matter: Percent = None
    moisture_content: Percent = None
    soil_texture: enums.SoilTexture | None = None
    bulk_density: Decimal | None = Field(default=None, ge=0)
    porosity: Percent = None
    electrical_conductivity: Decimal | None = Field(default=None, ge=0)
    measurement_date: date
    depth_cm: int | None = Field(default=None, gt=0)


class BuyerSchema(RecordSchema):
    user_id: str = Field(..., min_length=1, max_length=32)
    company_name: str = Field(..., min_length=2, max_length=200)
    buyer_type: enums.BuyerType
    location: str | None = Field(default=None, max_length=255)
    primary_products: list[str] | None = None
    credit_limit: Decimal | None = Field(default=None, ge=0)
    credit_rating: enums.CreditRating | None = None
    storage_capacity: Decimal | None = Field(default=None, ge=0)
    transport_capacity: Decimal | None = Field(default=None, ge=0)
    established_year: int | None = Field(default=None, ge=1800, le=2200)
    annual_volume: Decimal | None = Field(default=None, ge=0)
    rating: Decimal | None = Field(default=None, ge=0, le=5)
    verified: bool | None = None


class MarketPriceSchema(RecordSchema):
    crop_id: str = Field(..., min_length=1, max_length=32)
    market_name: str = Field(..., min_length=1, max_length=150)
    market_type: enums.MarketType
    price_date: date
    price_per_kg: Decimal = Field(..., gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    demand_level: enums.DemandLevel | None = None
    supply_level: enums.SupplyLevel | None = None
    price_trend: enums.PriceTrend | None = None
    seasonal_factor: Decimal | None = Field(default=None, ge=0)
    transport_cost: Decimal | None = Field(default=None, ge=0)
    storage_cost: Decimal | None = Field(default=None, ge=0)
    processing_cost: Decimal | None = Field(default=None, ge=0)
    reliability_score: int | None = Field(default=None, ge=1, le=5)


class TransactionSchema(RecordSchema):
    farmer_id: str = Field(..., min_length=1, max_length=32)
    buyer_id: str = Field(..., min_length=1, max_length=32)
    crop_id: str = Field(..., min_length=1, max_length=32)
    quantity: Decimal = Field(..., gt=0)
    price_per_unit: Decimal = Field(..., gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    status: enums.TransactionStatus | None = None
    payment_method: enums.PaymentMethod | None = None
    advance_payment: Decimal | None = Field(default=None, ge=0)
    transport_responsibility: enums.TransportResponsibility | None = None
    transport_cost: Decimal | None = Field(default=None, ge=0)
    insurance_cost: Decimal | None = Field(default=None, ge=0)
    broker_commission: Decimal | None = Field(default=None, ge=0)
    government_tax: Decimal | None = Field(default=None, ge=0)
    rating_farmer: int | None = Field(default=None, ge=1, le=5)
    rating_buyer: int | None = Field(default=None, ge=1, le=5)
    notes: str | None = Field(default=None, max_length=2000)


class InventorySchema(RecordSchema):
    crop_id: str = Field(..., min_length=1, max_length=32)
    facility_type: enums.FacilityType
    storage_location: str = Field(..., min_length=1, max_length=255)
    storage_capacity: Decimal | None = Field(default=None, ge=0)
    current_quantity: Decimal = Field(..., ge=0)
    reserved_quantity: Decimal | None = Field(default=None, ge=0)
    expected_shelf_life_days: int | None = Field(default=None, ge=0)
    market_value_per_unit: Decimal | None = Field(default=None, ge=0)
    purchase_price_per_unit: Decimal | None = Field(default=None, ge=0)
    storage_cost_per_unit: Decimal | None = Field(default=None, ge=0)
    status: enums.InventoryStatus | None = None
    moisture_content: Percent = None
    pest_status: enums.PestStatus | None = None
    packaging_condition: enums.PackagingCondition | None = None
    loss_percentage: Percent = None
    reorder_level: Decimal | None = Field(default=None, ge=0)
    maximum_stock_level: Decimal | None = Field(default=None, ge=0)
    minimum_stock_level: Decimal | None = Field(default=None, ge=0)


class SupplyChainSchema(RecordSchema):
    crop_production_id: str = Field(..., min_length=1, max_length=32)
    stage: enums.SupplyChainStage
    location: str = Field(..., min_length=1, max_length=255)
    quantity_in: Decimal | None = Field(default=None, ge=0)
    quantity_out: Decimal | None = Field(default=None, ge=0)
    loss_quantity: Decimal | None = Field(default=None, ge=0)
    quality_status: enums.QualityStatus | None = None
    cost_incurred: Decimal | None = Field(default=None, ge=0)
    stage_start_date: datetime | None = None
    stage_end_date: datetime | None = None


class EnvironmentalDataSchema(RecordSchema):
    region: str = Field(..., min_length=1, max_length=100)
    record_date: date
    data_source: enums.DataSource | None = None
    latitude: Decimal | None = Field(default=None, ge=-90, le=90)
    longitude: Decimal | None = Field(default=None, ge=-180, le=180)
    air_quality_index: Decimal | None = Field(default=None, ge=0, le=500)
    water_quality_index: Percent = None
    water_ph: Decimal | None = Field(default=None, ge=0, le=14)
    forest_coverage: Percent = None
    deforestation_rate: Decimal | None = Field(default=None, ge=0)
    species_count: int | None = Field(default=None, ge=0)
    endangered_species_count: int | None = Field(default=None, ge=0)
    soil_erosion_rate: Decimal | None = Field(default=None, ge=0)
    climate_resilience_score: Percent = None
    monitoring_frequency: enums.MonitoringFrequency | None = None
    data_quality: enums.DataQuality | None = None
    validation_status: enums.ValidationStatus | None = None


class ClimateImpactSchema(RecordSchema):
    region: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, le=2200)
    climate_event: enums.ClimateEvent
    event_intensity: enums.EventIntensity | None = None
    event_start_date: date
    event_end_date: date | None = None
    affected_area: Decimal | None = Field(default=None, ge=0)
    affected_population: int | None = Field(default=None, ge=0)
    production_loss: Decimal | None = Field(default=None, ge=0)
    economic_loss: Decimal | None = Field(default=None, ge=0)


class WeatherDataSchema(RecordSchema):
    latitude: Decimal = Field(..., ge=-90, le=90)
    longitude: Decimal = Field(..., ge=-180, le=180)
    record_date: datetime
    temperature: Decimal | None = Field(default=None, ge=-60, le=60)
    humidity: Percent = None
    rainfall: Decimal | None = Field(default=None, ge=0)
    wind_speed: Decimal | None = Field(default=None, ge=0)
    weather_condition: enums.WeatherCondition | None = None
    uv_index: Decimal | None = Field(default=None, ge=0, le=20)
    data_quality: enums.DataQuality | None = None


class PolicyDataSchema(RecordSchema):
    policy_name: str = Field(..., min_length=3, max_length=200)
    policy_type: enums.PolicyType
    policy_category: enums.PolicyCategory | None = None
    geographic_scope: enums.GeographicScope | None = None
    effective_date: date
    expiry_date: date | None = None
    total_budget: Decimal | None = Field(default=None, ge=0)
    budget_allocated: Decimal | None = Field(default=None, ge=0)
    budget_utilized: Decimal | None = Field(default=None, ge=0)
    target_beneficiaries: int | None = Field(default=None, ge=0)
    actual_beneficiaries: int | None = Field(default=None, ge=0)
    effectiveness_score: Percent = None
    status: enums.PolicyStatus | None = None


class FoodSecurityAlertSchema(RecordSchema):
    alert_title: str = Field(..., min_length=5, max_length=200)
    alert_category: enums.AlertCategory
    alert_level: enums.AlertLevel
    severity_score: int | None = Field(default=None, ge=1, le=10)
    affected_region: str = Field(..., min_length=1, max_length=100)
    affected_districts: list[str] | None = None
    affected_crops: list[str] | None = None
    affected_population: int | None = Field(default=None, ge=0)
    expiry_date: datetime | None = None
    source_reliability: enums.SourceReliability | None = None
    escalation_level: int | None = Field(default=None, ge=1, le=5)
    economic_impact: Decimal | None = Field(default=None, ge=0)
    resolution_status: enums.ResolutionStatus | None = None


class ProductionPredictionSchema(RecordSchema):
    crop_id: str = Field(..., min_length=1, max_length=32)
    year: int = Field(..., ge=1900, le=2200)
    season: enums.Season | None = None
    prediction_type: enums.PredictionType
    predicted_value: Decimal = Field(..., ge=0)
    confidence_level: Percent = None
    prediction_interval_min: Decimal | None = None
    prediction_interval_max: Decimal | None = None
    historical_accuracy: Percent = None
    actual_value: Decimal | None = Field(default=None, ge=0)
    validation_status: enums.ValidationStatus | None = None


class ResourceRecommendationSchema(RecordSchema):
    farm_id: str = Field(..., min_length=1, max_length=32)
    resource_type: enums.ResourceType
    recommendation_category: enums.RecommendationCategory | None = None
    priority_level: enums.PriorityLevel | None = None
    title: str = Field(..., min_length=5, max_length=200)
    recommended_quantity: Decimal | None = Field(default=None, ge=0)
    estimated_cost: Decimal | None = Field(default=None, ge=0)
    expected_roi: Decimal | None = None
    confidence_score: Percent = None
    sustainability_score: int | None = Field(default=None, ge=1, le=10)
    implementation_difficulty: enums.ImplementationDifficulty | None = None
    status: enums.RecommendationStatus | None = None
    effectiveness_rating: enums.EffectivenessRating | None = None
    actual_cost: Decimal | None = Field(default=None, ge=0)


class IrrigationPredictionSchema(RecordSchema):
    farm_id: str = Field(..., min_length=1, max_length=32)
    predicted_water_need: Decimal | None = Field(default=None, ge=0)
    predicted_irrigation_frequency: int | None = Field(default=None, ge=0)
    water_stress_risk: Percent = None
    optimal_irrigation_duration: int | None = Field(default=None, ge=0)
    cost_estimation: Decimal | None = Field(default=None, ge=0)
    confidence_level: Percent = None
    soil_moisture_target: Percent = None


class AIRecommendationSchema(RecordSchema):
    farmer_id: str = Field(..., min_length=1, max_length=32)
    recommendation_type: enums.AdvisoryType
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    priority: enums.AdvisoryPriority | None = None
    confidence_score: Decimal | None = Field(default=None, ge=0, le=1)
    effectiveness_rating: int | None = Field(default=None, ge=1, le=5)
    valid_from: datetime | None = None
    valid_until: datetime | None = None


SCHEMAS: dict[type, type[RecordSchema]] = {
    models.Farmer: FarmerSchema,
    models.Farm: FarmSchema,
    models.Crop: CropSchema,
    models.CropProduction: CropProductionSchema,
    models.FertilizerUsage: FertilizerUsageSchema,
    models.IrrigationData: IrrigationDataSchema,
    models.SoilData: SoilDataSchema,
    models.Buyer: BuyerSchema,
    models.MarketPrice: MarketPriceSchema,
    models.Transaction: TransactionSchema,
    models.Inventory: InventorySchema,
    models.SupplyChain: SupplyChainSchema,
    models.EnvironmentalData: EnvironmentalDataSchema,
    models.ClimateImpact: ClimateImpactSchema,
    models.WeatherData: WeatherDataSchema,
    models.PolicyData: PolicyDataSchema,
    models.FoodSecurityAlert: FoodSecurityAlertSchema,
    models.ProductionPrediction: ProductionPredictionSchema,
    models.ResourceRecommendation: ResourceRecommendationSchema,
    models.IrrigationPrediction: IrrigationPredictionSchema,
    models.AIRecommendation: AIRecommendationSchema,
}


def validate_state(model: type, values: dict[str, Any]) -> None:
    """Raise RecordValidationError listing every constraint `values` breaks."""
    schema = SCHEMAS[model]
    try:
        schema.model_validate(values)
    except ValidationError as exc:
        raise RecordValidationError(model.__name__, exc.errors()) from exc
