"""
Consultation intake and submission routes.
Clean endpoint definitions using the controller layer.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..controllers.submission_controller import SubmissionController
from ..core.database import get_db
from ..core.dependencies import checked_submission, get_dispatcher
from ..schemas.submission import (
    ContactSubmissionCreate, ContactSubmissionResponse, ContactSubmitResponse,
)
from ..schemas.prospect import ProspectResponse
from ..schemas.client import ClientResponse, BulkConversionResponse
from ..services.notification_service import NotificationDispatcher


router = APIRouter()


@router.post(
    "/contact",
    response_model=ContactSubmitResponse,
    summary="Submit a consultation request",
    description="Public consultation form endpoint"
)
async def submit_contact(
    submission_data: ContactSubmissionCreate = Depends(checked_submission),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher)
):
    """
    Store a consultation request.

    - **name**: at least 2 characters
    - **email**: a valid email address
    - **message**: at least MESSAGE_MIN_LENGTH characters (10 by default)
    - **package**: optional package of interest (startup, growth, ongoing)

    The business inbox is notified in the background; a failed notification
    does not affect the stored submission or this response.
    """
    controller = SubmissionController(db, dispatcher)
    return await controller.submit(submission_data)


@router.get(
    "/contact-submissions",
    response_model=List[ContactSubmissionResponse],
    summary="Get all submissions",
    description="All consultation submissions, newest first"
)
async def get_submissions(db: Session = Depends(get_db)):
    controller = SubmissionController(db)
    return await controller.get_submissions()


@router.get(
    "/contact-submissions/unconverted",
    response_model=List[ContactSubmissionResponse],
    summary="Get unconverted submissions",
    description="Submissions whose email matches no prospect and no client"
)
async def get_unconverted_submissions(db: Session = Depends(get_db)):
    controller = SubmissionController(db)
    return await controller.get_unconverted_submissions()


@router.post(
    "/contact-submissions/convert-all-to-clients",
    response_model=BulkConversionResponse,
    summary="Convert all new submissions to clients",
    description="Create an active client for every submission whose email is not yet a client"
)
async def convert_all_to_clients(db: Session = Depends(get_db)):
    controller = SubmissionController(db)
    return await controller.convert_all_to_clients()


@router.get(
    "/contact-submissions/{submission_id}",
    response_model=ContactSubmissionResponse,
    summary="Get submission by ID"
)
async def get_submission(submission_id: str, db: Session = Depends(get_db)):
    controller = SubmissionController(db)
    return await controller.get_submission(submission_id)


@router.post(
    "/contact-submissions/{submission_id}/convert-to-prospect",
    response_model=ProspectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Convert submission to prospect",
    description="Fails with 409 if a prospect with the same email already exists"
)
async def convert_to_prospect(submission_id: str, db: Session = Depends(get_db)):
    """
    Create a prospect from a submission.

    The prospect starts as **new** with **medium** priority, source
    **consultation_form**, and notes seeded from the original message.
    """
    controller = SubmissionController(db)
    return await controller.convert_to_prospect(submission_id)


@router.post(
    "/contact-submissions/{submission_id}/convert-to-client",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Convert submission to client",
    description="Fails with 409 if a client with the same email already exists"
)
async def convert_to_client(submission_id: str, db: Session = Depends(get_db)):
    """
    Create an active client from a submission.

    Monthly value comes from the package: startup £750, growth £2,000,
    ongoing £1,500, anything else £750.
    """
    controller = SubmissionController(db)
    return await controller.convert_to_client(submission_id)
