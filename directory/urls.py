from django.urls import path
from . import views

app_name = 'directory'

urlpatterns = [
    path('<str:state>/', views.state_page, name='state'),
    path('<str:state>/<str:practice_area>/', views.practice_area_page, name='practice_area'),
]
