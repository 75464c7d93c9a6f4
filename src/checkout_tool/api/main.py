from decimal import Decimal
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from checkout_tool import __version__
from checkout_tool.catalog import Category
from checkout_tool.engine import CustomerType, Customer, LineItem
from checkout_tool.engine.coupons import recognized_codes
from checkout_tool.errors import PricingError, UnknownSkuError
from checkout_tool.api import state

app = FastAPI(
    title="Checkout Tool API",
    description="Pricing and discount engine for the retail checkout",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CalcItem(BaseModel):
    sku: str
    quantity: int = Field(ge=1)
    # Frozen cart price; defaults to the current catalog price
    unit_price: Optional[Decimal] = Field(default=None, gt=0)


class CalcRequest(BaseModel):
    customer_id: str = "ANONYMOUS"
    customer_type: CustomerType = CustomerType.REGULAR
    items: list[CalcItem]
    coupon_code: Optional[str] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Checkout Tool API Active"}


@app.post("/calculate")
async def calculate(req: CalcRequest):
    try:
        line_items = [
            LineItem(
                sku=item.sku,
                quantity=item.quantity,
                unit_price=item.unit_price if item.unit_price is not None
                else state.catalog.get_product(item.sku).price,
            )
            for item in req.items
        ]
        customer = Customer(customer_id=req.customer_id, name=req.customer_id, customer_type=req.customer_type)
        breakdown = state.engine.calculate(customer, line_items, req.coupon_code)
        return breakdown.to_dict()
    except UnknownSkuError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PricingError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/catalog")
async def get_catalog(search: Optional[str] = None, category: Optional[str] = None):
    df = state.catalog.to_frame()
    if search:
        mask = (
            df.index.str.contains(search, case=False, na=False, regex=False) |
            df['name'].str.contains(search, case=False, na=False, regex=False)
        )
        df = df[mask]
    if category:
        try:
            df = df[df['category'] == Category.parse(category).value]
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return [
        {
            "sku": sku,
            "name": row['name'],
            "price": str(row['price']),
            "manufacturer": row['manufacturer'],
            "category": row['category'],
            "max_installments": int(row['max_installments']),
            "stock": state.inventory.get_quantity(sku),
        }
        for sku, row in df.iterrows()
    ]


@app.get("/coupons")
async def get_coupons():
    return {"coupons": recognized_codes()}


@app.get("/system/status")
async def get_status():
    return {
        "engine_active": True,
        "products": len(state.catalog),
        "metrics": state.load_report["metrics"],
        "warnings": state.load_report["warnings"],
        "loaded_at": state.load_report["timestamp"],
    }
