"""
Companies router.

Handles all company endpoints:
- GET /companies/ - List companies (page envelope with page & pageSize)
- GET /companies/{company_id} - Get company view
- GET /companies/{company_id}/employees - Get the company's employees
- POST /companies/ - Create company
- PUT /companies/{company_id} - Replace company
- DELETE /companies/{company_id} - Delete company
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.errors import ERROR_RESPONSES, to_http_exception
from app.core.errors import ServiceError
from app.deps.services import get_company_service
from app.models.company_schema import CompanyRequest, CompanyResponse
from app.models.employee_schema import Employee
from app.services.company_service import CompanyService

logger = logging.getLogger(__name__)
companies_router = APIRouter(prefix="/companies", tags=["Companies"], responses=ERROR_RESPONSES)


@companies_router.get("/")
async def list_companies(
    page: Optional[int] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    service: CompanyService = Depends(get_company_service),
):
    """List all companies, or one page of them when paging is requested."""
    try:
        return await service.get_companies(page, page_size)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Failed to list companies")
        raise HTTPException(status_code=500, detail="Failed to list companies")


@companies_router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
):
    try:
        return await service.get_company(company_id)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to get company {company_id}")
        raise HTTPException(status_code=500, detail="Failed to get company")


@companies_router.get("/{company_id}/employees", response_model=List[Employee])
async def get_company_employees(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
):
    try:
        return await service.get_employees_of_company(company_id)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to get employees of company {company_id}")
        raise HTTPException(status_code=500, detail="Failed to get company employees")


@companies_router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(
    payload: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
):
    try:
        return await service.create_company(payload)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Failed to create company")
        raise HTTPException(status_code=500, detail="Failed to create company")


@companies_router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: str,
    payload: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
):
    """Replace the name and employee list of a company."""
    try:
        return await service.update_company(company_id, payload)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to update company {company_id}")
        raise HTTPException(status_code=500, detail="Failed to update company")


@companies_router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
):
    try:
        await service.delete_company(company_id)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to delete company {company_id}")
        raise HTTPException(status_code=500, detail="Failed to delete company")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
